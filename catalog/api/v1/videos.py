# catalog/api/v1/videos.py
"""
Video endpoints.

Store and update go through crud.video, which writes the video row and
replaces its category/genre associations in a single transaction.
"""
from ...crud import video as video_crud
from ...schemas.video import VideoCreate, VideoUpdate, VideoOut
from .controller import BasicCrudController


class VideoController(BasicCrudController):
    crud = video_crud
    rules_store = VideoCreate
    rules_update = VideoUpdate
    resource = VideoOut


controller = VideoController()
router = controller.build_router("/videos", tags=["videos"])
