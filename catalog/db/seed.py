# catalog/db/seed.py
"""Create the catalog tables and seed a small sample catalog

Run with: python -m catalog.db.seed
"""
from sqlalchemy.orm import Session
from ..models import Category, Genre, CastMember, CastMemberType
from ..database import SessionLocal, create_tables
from .. import crud
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

CATEGORIES = [
    {"name": "Movies", "description": "Feature-length films"},
    {"name": "Series", "description": "Television series and shows"},
    {"name": "Documentaries", "description": "Factual and educational content"},
]

GENRES = [
    {"name": "Action"},
    {"name": "Drama"},
    {"name": "Comedy"},
    {"name": "Horror"},
    {"name": "Sci-Fi"},
]

CAST_MEMBERS = [
    {"name": "Jane Director", "type": CastMemberType.DIRECTOR},
    {"name": "John Actor", "type": CastMemberType.ACTOR},
]

VIDEOS = [
    {
        "title": "The First Frame",
        "description": "A short film about the very first frame ever shot.",
        "year_launched": 2019,
        "opened": True,
        "rating": "L",
        "duration": 12,
        "categories": ["Movies"],
        "genres": ["Drama"],
    },
    {
        "title": "Night Shift",
        "description": "Strange things happen after midnight.",
        "year_launched": 2021,
        "opened": False,
        "rating": "16",
        "duration": 95,
        "categories": ["Movies"],
        "genres": ["Horror", "Action"],
    },
]


def seed_named(db: Session, model, rows: list) -> dict:
    """Insert rows that are not present yet, keyed by name. Returns name -> id."""
    ids = {}
    for row in rows:
        existing = (
            db.query(model)
            .filter(model.name == row["name"], model.deleted_at.is_(None))
            .first()
        )
        if existing:
            logger.info(f"{model.__name__} '{row['name']}' already exists, skipping...")
            ids[row["name"]] = existing.id
            continue

        obj = model(**row)
        db.add(obj)
        db.flush()
        ids[row["name"]] = obj.id
        logger.info(f"Added {model.__name__.lower()}: {row['name']}")

    db.commit()
    return ids


def seed_videos(db: Session, category_ids: dict, genre_ids: dict) -> None:
    for row in VIDEOS:
        existing = crud.video.query(db).filter_by(title=row["title"]).first()
        if existing:
            logger.info(f"Video '{row['title']}' already exists, skipping...")
            continue

        data = {key: value for key, value in row.items() if key not in ("categories", "genres")}
        data["categories_id"] = [category_ids[name] for name in row["categories"]]
        data["genres_id"] = [genre_ids[name] for name in row["genres"]]
        crud.video.create(db, obj_in=data)
        logger.info(f"Added video: {row['title']}")


def main():
    create_tables()
    logger.info("✅ Tables ensured")

    db = SessionLocal()
    try:
        category_ids = seed_named(db, Category, CATEGORIES)
        genre_ids = seed_named(db, Genre, GENRES)
        seed_named(db, CastMember, CAST_MEMBERS)
        seed_videos(db, category_ids, genre_ids)
        logger.info("✅ Catalog seeded successfully!")
    except Exception as e:
        db.rollback()
        logger.error(f"❌ Seeding failed: {e}", exc_info=True)
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
