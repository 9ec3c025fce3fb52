from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from uuid import UUID

from ..validation import RuleSet, boolean


class GenreCreate(RuleSet):
    name: str = Field(min_length=1, max_length=255)
    is_active: bool = True

    @field_validator("is_active", mode="before")
    @classmethod
    def is_active_boolean(cls, value):
        return boolean(value)


class GenreUpdate(GenreCreate):
    pass


class GenreOut(BaseModel):
    id: UUID
    name: str
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    class Config:
        from_attributes = True
