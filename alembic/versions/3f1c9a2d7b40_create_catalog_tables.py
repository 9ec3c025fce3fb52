"""create_catalog_tables

Revision ID: 3f1c9a2d7b40
Revises:
Create Date: 2026-10-19 10:12:41.208113

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a2d7b40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade():
    op.create_table(
        "categories",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *timestamps(),
    )
    op.create_index("ix_categories_name", "categories", ["name"])
    op.create_index("ix_categories_is_active", "categories", ["is_active"])
    op.create_index("ix_categories_deleted_at", "categories", ["deleted_at"])

    op.create_table(
        "genres",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *timestamps(),
    )
    op.create_index("ix_genres_name", "genres", ["name"])
    op.create_index("ix_genres_is_active", "genres", ["is_active"])
    op.create_index("ix_genres_deleted_at", "genres", ["deleted_at"])

    op.create_table(
        "cast_members",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("type", sa.SmallInteger(), nullable=False),
        *timestamps(),
    )
    op.create_index("ix_cast_members_name", "cast_members", ["name"])
    op.create_index("ix_cast_members_deleted_at", "cast_members", ["deleted_at"])

    op.create_table(
        "videos",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("year_launched", sa.Integer(), nullable=False),
        sa.Column("opened", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("rating", sa.String(length=3), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=False),
        *timestamps(),
    )
    op.create_index("ix_videos_title", "videos", ["title"])
    op.create_index("ix_videos_deleted_at", "videos", ["deleted_at"])

    op.create_table(
        "category_video",
        sa.Column("category_id", sa.Uuid(), sa.ForeignKey("categories.id"), primary_key=True),
        sa.Column("video_id", sa.Uuid(), sa.ForeignKey("videos.id"), primary_key=True),
    )
    op.create_index("ix_category_video_video_id", "category_video", ["video_id"])

    op.create_table(
        "genre_video",
        sa.Column("genre_id", sa.Uuid(), sa.ForeignKey("genres.id"), primary_key=True),
        sa.Column("video_id", sa.Uuid(), sa.ForeignKey("videos.id"), primary_key=True),
    )
    op.create_index("ix_genre_video_video_id", "genre_video", ["video_id"])


def downgrade():
    op.drop_table("genre_video")
    op.drop_table("category_video")
    op.drop_table("videos")
    op.drop_table("cast_members")
    op.drop_table("genres")
    op.drop_table("categories")
