# catalog/models/cast_member.py
"""Cast member model - people credited on videos"""
from enum import IntEnum
from sqlalchemy import Column, String, SmallInteger
from ..database import Base
from .mixins import UUIDPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin


class CastMemberType(IntEnum):
    DIRECTOR = 1
    ACTOR = 2


class CastMember(UUIDPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "cast_members"

    name = Column(String(255), nullable=False, index=True)
    type = Column(SmallInteger, nullable=False)

    @property
    def is_director(self) -> bool:
        return self.type == CastMemberType.DIRECTOR

    def __repr__(self):
        return f"<CastMember(id={self.id}, name={self.name}, type={self.type})>"
