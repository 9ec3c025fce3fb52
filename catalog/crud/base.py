import re
import uuid
import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
from sqlalchemy.orm import Session, Query
from sqlalchemy.sql import func

from ..database import Base, atomic
from ..exceptions import NotFoundError

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)

# columns a request body may never write
PROTECTED_FIELDS = {"id", "created_at", "updated_at", "deleted_at"}


def parse_id(value: Any) -> Optional[uuid.UUID]:
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


class CRUDBase(Generic[ModelType]):
    """
    Generic persistence operations for one soft-deletable model.

    Default queries only see live rows; soft-deleted rows are reachable
    through with_trashed=True.
    """

    def __init__(self, model: Type[ModelType]):
        self.model = model

    @property
    def label(self) -> str:
        """Human readable entity name, e.g. CastMember -> 'Cast member'"""
        return re.sub(r"(?<!^)(?=[A-Z])", " ", self.model.__name__).capitalize()

    def query(self, db: Session, *, with_trashed: bool = False) -> Query:
        query = db.query(self.model)
        if not with_trashed:
            query = query.filter(self.model.deleted_at.is_(None))
        return query

    def get(self, db: Session, id: Any, *, with_trashed: bool = False) -> Optional[ModelType]:
        row_id = parse_id(id)
        if row_id is None:
            return None
        return self.query(db, with_trashed=with_trashed).filter(self.model.id == row_id).first()

    def get_or_fail(self, db: Session, id: Any) -> ModelType:
        db_obj = self.get(db, id)
        if db_obj is None:
            raise NotFoundError(self.label, id)
        return db_obj

    def get_multi(
        self, db: Session, *, skip: int = 0, limit: Optional[int] = None
    ) -> List[ModelType]:
        query = self.query(db).order_by(self.model.created_at)
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def count(self, db: Session, *, with_trashed: bool = False) -> int:
        return self.query(db, with_trashed=with_trashed).count()

    def writable(self, obj_in: Dict[str, Any]) -> Dict[str, Any]:
        return {key: value for key, value in obj_in.items() if key not in PROTECTED_FIELDS}

    def create(self, db: Session, *, obj_in: Dict[str, Any]) -> ModelType:
        db_obj = self.model(**self.writable(obj_in))
        with atomic(db):
            db.add(db_obj)
        db.refresh(db_obj)
        logger.info(f"{self.label} created: {db_obj.id}")
        return db_obj

    def update(self, db: Session, *, db_obj: ModelType, obj_in: Dict[str, Any]) -> ModelType:
        with atomic(db):
            for field, value in self.writable(obj_in).items():
                setattr(db_obj, field, value)
            # stamped even when no column value changed
            db_obj.updated_at = func.now()
            db.add(db_obj)
        db.refresh(db_obj)
        logger.info(f"{self.label} updated: {db_obj.id}")
        return db_obj

    def remove(self, db: Session, *, db_obj: ModelType) -> ModelType:
        """Soft delete"""
        with atomic(db):
            db_obj.soft_delete()
            db.add(db_obj)
        logger.info(f"{self.label} deleted: {db_obj.id}")
        return db_obj
