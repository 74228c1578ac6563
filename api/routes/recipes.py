"""
RecipeVault recipe routes - CRUD for the current user's recipes.
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from typing import List, Optional

from api.dependencies import get_current_user, get_db
from api.responses import OWNER_SCOPED_RESPONSES
from domain.models import AppUser
from domain.schemas.recipe_schemas import RecipeCreate, RecipeUpdate, RecipeResponse
from services.recipe_service import RecipeService
from app.exceptions import NotFoundError

router = APIRouter(prefix="/recipe", tags=["Recipes"], responses=OWNER_SCOPED_RESPONSES)


@router.get("", response_model=List[RecipeResponse])
def get_recipes(
    favorite: Optional[bool] = Query(
        default=None, description="Only favorites (true) or non-favorites (false)"
    ),
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    recipes = RecipeService.get_recipes_for_user(db, user.id, favorite=favorite)
    return [RecipeResponse.model_validate(r) for r in recipes]


@router.post("", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
def create_recipe(
    recipe: RecipeCreate,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Create a recipe.

    Ingredients, nutritional values, steps, tools and tags may be sent inline
    and are created with the recipe.
    """
    created = RecipeService.create_recipe(db, user, recipe)
    return RecipeResponse.model_validate(created)


@router.get("/{recipe_id}", response_model=RecipeResponse)
def get_recipe(
    recipe_id: int,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    recipe = RecipeService.get_authorized_recipe(db, recipe_id, user)
    return RecipeResponse.model_validate(recipe)


@router.put("/{recipe_id}", response_model=RecipeResponse)
def update_recipe(
    recipe_id: int,
    recipe: RecipeUpdate,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Update a recipe; a component list that is sent replaces the stored one"""
    RecipeService.get_authorized_recipe(db, recipe_id, user)
    updated = RecipeService.update_recipe(db, recipe_id, recipe)
    if updated is None:
        raise NotFoundError(f"Recipe {recipe_id} not found")
    return RecipeResponse.model_validate(updated)


@router.patch("/{recipe_id}/favorite", response_model=RecipeResponse)
def toggle_favorite(
    recipe_id: int,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Flip the recipe's favorite flag"""
    RecipeService.get_authorized_recipe(db, recipe_id, user)
    updated = RecipeService.set_favorite(db, recipe_id)
    if updated is None:
        raise NotFoundError(f"Recipe {recipe_id} not found")
    return RecipeResponse.model_validate(updated)


@router.delete(
    "/{recipe_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_recipe(
    recipe_id: int,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Delete a recipe together with all of its components"""
    RecipeService.get_authorized_recipe(db, recipe_id, user)
    if not RecipeService.delete_recipe(db, recipe_id):
        raise NotFoundError(f"Recipe {recipe_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
