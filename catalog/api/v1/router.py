from fastapi import APIRouter
from . import categories, genres, cast_members, videos

api_router = APIRouter()

api_router.include_router(categories.router)
api_router.include_router(genres.router)
api_router.include_router(cast_members.router)
api_router.include_router(videos.router)

__all__ = ["api_router"]
