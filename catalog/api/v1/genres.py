# catalog/api/v1/genres.py
from ...crud import genre as genre_crud
from ...schemas.genre import GenreCreate, GenreUpdate, GenreOut
from .controller import BasicCrudController


class GenreController(BasicCrudController):
    crud = genre_crud
    rules_store = GenreCreate
    rules_update = GenreUpdate
    resource = GenreOut


controller = GenreController()
router = controller.build_router("/genres", tags=["genres"])
