from .base import CRUDBase
from .crud_video import CRUDVideo
from ..models import Category, Genre, CastMember, Video

category = CRUDBase(Category)
genre = CRUDBase(Genre)
cast_member = CRUDBase(CastMember)
video = CRUDVideo(Video)

__all__ = ["CRUDBase", "CRUDVideo", "category", "genre", "cast_member", "video"]
