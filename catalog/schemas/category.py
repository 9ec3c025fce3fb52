from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from uuid import UUID

from ..validation import RuleSet, boolean


class CategoryCreate(RuleSet):
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    is_active: bool = True

    @field_validator("description", mode="before")
    @classmethod
    def blank_description_is_null(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("is_active", mode="before")
    @classmethod
    def is_active_boolean(cls, value):
        return boolean(value)


class CategoryUpdate(CategoryCreate):
    pass


class CategoryOut(BaseModel):
    id: UUID
    name: str
    description: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    class Config:
        from_attributes = True
