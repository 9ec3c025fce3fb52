# catalog/api/v1/categories.py
from ...crud import category as category_crud
from ...schemas.category import CategoryCreate, CategoryUpdate, CategoryOut
from .controller import BasicCrudController


class CategoryController(BasicCrudController):
    crud = category_crud
    rules_store = CategoryCreate
    rules_update = CategoryUpdate
    resource = CategoryOut


controller = CategoryController()
router = controller.build_router("/categories", tags=["categories"])
