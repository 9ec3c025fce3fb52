import logging
from typing import Any, Dict, Iterable, Optional, Tuple
from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from ..crud.base import CRUDBase, parse_id
from ..database import atomic
from ..models.category import Category
from ..models.genre import Genre
from ..models.video import Video

logger = logging.getLogger(__name__)

RELATION_FIELDS = ("categories_id", "genres_id")


class CRUDVideo(CRUDBase[Video]):
    """
    Video writes touch three tables. The row and both association sets are
    written inside one transaction: either all of it is committed or none.
    """

    def split_relations(self, obj_in: Dict[str, Any]) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        fields = {key: value for key, value in obj_in.items() if key not in RELATION_FIELDS}
        relations = {key: obj_in[key] for key in RELATION_FIELDS if key in obj_in}
        return self.writable(fields), relations

    def create(self, db: Session, *, obj_in: Dict[str, Any]) -> Video:
        fields, relations = self.split_relations(obj_in)
        video = Video(**fields)
        try:
            with atomic(db):
                db.add(video)
                db.flush()
                self.sync_relations(db, video, **relations)
        except Exception:
            logger.error("Video create failed, transaction rolled back", exc_info=True)
            raise

        db.refresh(video)
        logger.info(f"Video created: {video.id}")
        return video

    def update(self, db: Session, *, db_obj: Video, obj_in: Dict[str, Any]) -> Video:
        fields, relations = self.split_relations(obj_in)
        try:
            with atomic(db):
                for field, value in fields.items():
                    setattr(db_obj, field, value)
                # relation-only changes still count as an update
                db_obj.updated_at = func.now()
                db.add(db_obj)
                db.flush()
                self.sync_relations(db, db_obj, **relations)
        except Exception:
            logger.error(f"Video update failed for {db_obj.id}, transaction rolled back", exc_info=True)
            raise

        db.refresh(db_obj)
        logger.info(f"Video updated: {db_obj.id}")
        return db_obj

    def sync_relations(
        self,
        db: Session,
        video: Video,
        categories_id: Optional[Iterable[Any]] = None,
        genres_id: Optional[Iterable[Any]] = None,
    ) -> None:
        """
        Replace the video's category and genre sets with the given ids.
        A set left as None is not touched. Soft-deleted targets are
        accepted here; callers validate liveness beforehand.
        """
        if categories_id is not None:
            video.categories = self._load(db, Category, categories_id)
        if genres_id is not None:
            video.genres = self._load(db, Genre, genres_id)
        db.flush()

    @staticmethod
    def _load(db: Session, model, ids: Iterable[Any]) -> list:
        wanted = {row_id for row_id in (parse_id(value) for value in ids) if row_id is not None}
        if not wanted:
            return []
        return db.query(model).filter(model.id.in_(wanted)).all()
