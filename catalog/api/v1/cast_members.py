# catalog/api/v1/cast_members.py
from ...crud import cast_member as cast_member_crud
from ...schemas.cast_member import CastMemberCreate, CastMemberUpdate, CastMemberOut
from .controller import BasicCrudController


class CastMemberController(BasicCrudController):
    crud = cast_member_crud
    rules_store = CastMemberCreate
    rules_update = CastMemberUpdate
    resource = CastMemberOut


controller = CastMemberController()
router = controller.build_router("/cast_members", tags=["cast_members"])
