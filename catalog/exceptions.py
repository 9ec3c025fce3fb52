"""Domain errors raised by the catalog controllers and CRUD layer"""
from typing import Any, Dict, List


class CatalogError(Exception):
    """Base class for every error the catalog raises on purpose"""


class ValidationFailed(CatalogError):
    """
    Request data broke one or more field rules.

    errors maps each offending field to the list of messages collected for it.
    """

    message = "The given data was invalid."

    def __init__(self, errors: Dict[str, List[str]]):
        super().__init__(self.message)
        self.errors = errors

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "errors": self.errors}


class NotFoundError(CatalogError):
    """Requested identifier is unknown, malformed or soft-deleted"""

    def __init__(self, entity: str, identifier: Any):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} not found")

    @property
    def detail(self) -> str:
        return f"{self.entity} not found"
