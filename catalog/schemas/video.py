import re
from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError
from typing import ClassVar, Dict, List, Literal, Optional, Any
from datetime import datetime
from uuid import UUID

from ..models.category import Category
from ..models.genre import Genre
from ..validation import RuleSet, boolean

YEAR_PATTERN = re.compile(r"\d{4}")


class VideoCreate(RuleSet):
    exists_rules: ClassVar[Dict[str, Any]] = {
        "categories_id": Category,
        "genres_id": Genre,
    }

    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    year_launched: int
    opened: bool = False
    rating: Literal['L', '10', '12', '14', '16', '18']
    duration: int
    categories_id: List[str] = Field(min_length=1)
    genres_id: List[str] = Field(min_length=1)

    @field_validator("opened", mode="before")
    @classmethod
    def opened_boolean(cls, value):
        return boolean(value)

    @field_validator("year_launched", mode="before")
    @classmethod
    def year_format(cls, value):
        if value is None:
            return value
        if isinstance(value, bool) or not YEAR_PATTERN.fullmatch(str(value).strip()):
            raise PydanticCustomError(
                "date_format",
                "Value does not match the format {format}",
                {"format": "Y"},
            )
        return value

    @field_validator("rating", mode="before")
    @classmethod
    def rating_as_text(cls, value):
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("categories_id", "genres_id", mode="before")
    @classmethod
    def ids_as_text(cls, value):
        if isinstance(value, list):
            return [str(item) for item in value]
        return value


class VideoUpdate(VideoCreate):
    pass


class RelatedOut(BaseModel):
    id: UUID
    name: str

    class Config:
        from_attributes = True


class VideoOut(BaseModel):
    id: UUID
    title: str
    description: str
    year_launched: int
    opened: bool
    rating: str
    duration: int
    created_at: datetime
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None
    categories: List[RelatedOut] = []
    genres: List[RelatedOut] = []

    class Config:
        from_attributes = True
