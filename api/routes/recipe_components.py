"""
RecipeVault component routes.

One router per component kind, all with the expense route shape:
list / get / create / update / delete under /recipe/{recipe_id}/{kind}.
"""

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel
from sqlalchemy.orm import Session
from typing import List, Type

from api.dependencies import get_current_user, get_db
from api.responses import OWNER_SCOPED_RESPONSES
from domain.models import AppUser
from domain.schemas import recipe_schemas as schemas
from services.recipe_component_service import (
    COMPONENT_KINDS,
    ComponentKind,
    RecipeComponentService,
)
from services.recipe_service import RecipeService
from app.exceptions import NotFoundError


def _load_component(db: Session, kind: ComponentKind, recipe_id: int, component_id: int):
    """Fetch a component, treating one that hangs off another recipe as absent"""
    component = RecipeComponentService.get_component(db, kind, component_id)
    if component is None or component.recipe_id != recipe_id:
        raise NotFoundError(
            f"{kind.label} {component_id} not found in recipe {recipe_id}",
            details={"recipe_id": recipe_id, "component_id": component_id},
        )
    return component


def build_component_router(
    kind: ComponentKind,
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    response_schema: Type[BaseModel],
) -> APIRouter:
    router = APIRouter(
        prefix=f"/recipe/{{recipe_id}}/{kind.path}",
        tags=[f"Recipe {kind.path}"],
        responses=OWNER_SCOPED_RESPONSES,
    )

    @router.get("", response_model=List[response_schema], name=f"list_{kind.path}")
    def list_components(
        recipe_id: int,
        user: AppUser = Depends(get_current_user),
        db: Session = Depends(get_db),
    ):
        RecipeService.get_authorized_recipe(db, recipe_id, user)
        items = RecipeComponentService.list_components(db, kind, recipe_id, user.id)
        return [response_schema.model_validate(i) for i in items]

    @router.get("/{component_id}", response_model=response_schema, name=f"get_{kind.path}")
    def get_component(
        recipe_id: int,
        component_id: int,
        user: AppUser = Depends(get_current_user),
        db: Session = Depends(get_db),
    ):
        RecipeService.get_authorized_recipe(db, recipe_id, user)
        return response_schema.model_validate(
            _load_component(db, kind, recipe_id, component_id)
        )

    @router.post(
        "",
        response_model=response_schema,
        status_code=status.HTTP_201_CREATED,
        name=f"create_{kind.path}",
    )
    def create_component(
        recipe_id: int,
        payload: create_schema,
        user: AppUser = Depends(get_current_user),
        db: Session = Depends(get_db),
    ):
        RecipeService.get_authorized_recipe(db, recipe_id, user)
        created = RecipeComponentService.create_component(db, kind, recipe_id, payload)
        return response_schema.model_validate(created)

    @router.put("/{component_id}", response_model=response_schema, name=f"update_{kind.path}")
    def update_component(
        recipe_id: int,
        component_id: int,
        payload: update_schema,
        user: AppUser = Depends(get_current_user),
        db: Session = Depends(get_db),
    ):
        RecipeService.get_authorized_recipe(db, recipe_id, user)
        _load_component(db, kind, recipe_id, component_id)
        updated = RecipeComponentService.update_component(db, kind, component_id, payload)
        if updated is None:
            raise NotFoundError(f"{kind.label} {component_id} not found")
        return response_schema.model_validate(updated)

    @router.delete(
        "/{component_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        name=f"delete_{kind.path}",
    )
    def delete_component(
        recipe_id: int,
        component_id: int,
        user: AppUser = Depends(get_current_user),
        db: Session = Depends(get_db),
    ):
        RecipeService.get_authorized_recipe(db, recipe_id, user)
        _load_component(db, kind, recipe_id, component_id)
        if not RecipeComponentService.delete_component(db, kind, component_id):
            raise NotFoundError(f"{kind.label} {component_id} not found")
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


_SCHEMAS = {
    "ingredients": (
        schemas.IngredientCreate,
        schemas.IngredientUpdate,
        schemas.IngredientResponse,
    ),
    "nutritional-values": (
        schemas.NutritionalValueCreate,
        schemas.NutritionalValueUpdate,
        schemas.NutritionalValueResponse,
    ),
    "steps": (
        schemas.RecipeStepCreate,
        schemas.RecipeStepUpdate,
        schemas.RecipeStepResponse,
    ),
    "tools": (schemas.ToolCreate, schemas.ToolUpdate, schemas.ToolResponse),
    "tags": (schemas.TagCreate, schemas.TagUpdate, schemas.TagResponse),
}

routers = [
    build_component_router(COMPONENT_KINDS[path], *_SCHEMAS[path])
    for path in COMPONENT_KINDS
]
