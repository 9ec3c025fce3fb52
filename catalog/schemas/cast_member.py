from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from uuid import UUID

from ..models.cast_member import CastMemberType
from ..validation import RuleSet


class CastMemberCreate(RuleSet):
    name: str = Field(min_length=1, max_length=255)
    type: CastMemberType

    @field_validator("type", mode="before")
    @classmethod
    def numeric_text_as_int(cls, value):
        # form posts send "1" / "2"
        if isinstance(value, str) and value.strip().isdigit():
            return int(value)
        return value


class CastMemberUpdate(CastMemberCreate):
    pass


class CastMemberOut(BaseModel):
    id: UUID
    name: str
    type: int
    created_at: datetime
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    class Config:
        from_attributes = True
