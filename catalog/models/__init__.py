from catalog.database import Base
from catalog.models.category import Category
from catalog.models.genre import Genre
from catalog.models.cast_member import CastMember, CastMemberType
from catalog.models.video import Video, RATING_LIST, category_video, genre_video

# This ensures all models are registered with Base.metadata
__all__ = [
    "Base", "Category", "Genre", "CastMember", "CastMemberType",
    "Video", "RATING_LIST", "category_video", "genre_video",
]
