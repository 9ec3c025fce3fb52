# catalog/api/v1/controller.py
"""
Generic resource controller.

A subclass names the CRUD object, the rule sets used by store/update and
the response schema; build_router() turns it into the five resourceful
routes (index, store, show, update, destroy).
"""
from fastapi import APIRouter, Body, Depends, Query, Response, status
from sqlalchemy.orm import Session
from pydantic import BaseModel
from typing import Any, Dict, List, Optional, Type
import logging

from ...crud.base import CRUDBase
from ...database import get_db
from ...validation import RuleSet, validate

logger = logging.getLogger(__name__)


class BasicCrudController:
    crud: CRUDBase
    rules_store: Type[RuleSet]
    rules_update: Type[RuleSet]
    resource: Type[BaseModel]

    def validate(self, db: Session, data: Any, rules: Type[RuleSet]) -> Dict[str, Any]:
        return validate(db, rules, {} if data is None else data)

    def find_or_fail(self, db: Session, resource_id: Any):
        return self.crud.get_or_fail(db, resource_id)

    def index(self, db: Session, *, skip: int = 0, limit: Optional[int] = None) -> list:
        return self.crud.get_multi(db, skip=skip, limit=limit)

    def store(self, db: Session, data: Any):
        validated = self.validate(db, data, self.rules_store)
        return self.crud.create(db, obj_in=validated)

    def show(self, db: Session, resource_id: Any):
        return self.find_or_fail(db, resource_id)

    def update(self, db: Session, resource_id: Any, data: Any):
        validated = self.validate(db, data, self.rules_update)
        db_obj = self.find_or_fail(db, resource_id)
        return self.crud.update(db, db_obj=db_obj, obj_in=validated)

    def destroy(self, db: Session, resource_id: Any) -> None:
        db_obj = self.find_or_fail(db, resource_id)
        self.crud.remove(db, db_obj=db_obj)

    def build_router(self, prefix: str, tags: Optional[List[str]] = None) -> APIRouter:
        router = APIRouter(prefix=prefix, tags=tags or [prefix.strip("/")])
        controller = self
        resource = self.resource

        @router.get("", response_model=List[resource], status_code=status.HTTP_200_OK)
        def index(
            skip: int = Query(0, ge=0),
            limit: Optional[int] = Query(None, ge=1),
            db: Session = Depends(get_db),
        ):
            return controller.index(db, skip=skip, limit=limit)

        @router.post("", response_model=resource, status_code=status.HTTP_201_CREATED)
        def store(payload: Any = Body(None), db: Session = Depends(get_db)):
            return controller.store(db, payload)

        @router.get("/{resource_id}", response_model=resource)
        def show(resource_id: str, db: Session = Depends(get_db)):
            return controller.show(db, resource_id)

        @router.api_route("/{resource_id}", methods=["PUT", "PATCH"], response_model=resource)
        def update(resource_id: str, payload: Any = Body(None), db: Session = Depends(get_db)):
            return controller.update(db, resource_id, payload)

        @router.delete(
            "/{resource_id}",
            status_code=status.HTTP_204_NO_CONTENT,
            response_class=Response,
        )
        def destroy(resource_id: str, db: Session = Depends(get_db)):
            controller.destroy(db, resource_id)
            return Response(status_code=status.HTTP_204_NO_CONTENT)

        return router
