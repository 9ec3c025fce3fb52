# catalog/models/video.py
"""
Video model for the catalog

Categories and genres are attached through plain association tables.
The relationships load soft-deleted targets too: a video keeps pointing at
a category or genre that was removed after the association was made.
"""
from sqlalchemy import Column, String, Text, Boolean, Integer, ForeignKey, Table, Uuid
from sqlalchemy.orm import relationship
from ..database import Base
from .mixins import UUIDPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin

RATING_LIST = ('L', '10', '12', '14', '16', '18')

# Association tables for the many-to-many relationships
category_video = Table(
    'category_video',
    Base.metadata,
    Column('category_id', Uuid, ForeignKey('categories.id'), primary_key=True),
    Column('video_id', Uuid, ForeignKey('videos.id'), primary_key=True, index=True)
)

genre_video = Table(
    'genre_video',
    Base.metadata,
    Column('genre_id', Uuid, ForeignKey('genres.id'), primary_key=True),
    Column('video_id', Uuid, ForeignKey('videos.id'), primary_key=True, index=True)
)


class Video(UUIDPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "videos"

    # ==================== BASIC INFO ====================
    title = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False)

    # ==================== VIDEO DETAILS ====================
    year_launched = Column(Integer, nullable=False)
    opened = Column(Boolean, default=False, nullable=False)
    rating = Column(String(3), nullable=False)  # one of RATING_LIST
    duration = Column(Integer, nullable=False)  # minutes

    # ==================== RELATIONSHIPS ====================
    categories = relationship(
        "Category",
        secondary=category_video,
        back_populates="videos",
        lazy="selectin",
    )

    genres = relationship(
        "Genre",
        secondary=genre_video,
        back_populates="videos",
        lazy="selectin",
    )

    @property
    def categories_id(self) -> list:
        return [category.id for category in self.categories]

    @property
    def genres_id(self) -> list:
        return [genre.id for genre in self.genres]

    def __repr__(self):
        return f"<Video(id={self.id}, title='{self.title}', rating={self.rating})>"
