"""
Recipe service - RecipeVault recipes with their nested components.
"""

from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from domain.models import AppUser, Recipe
from domain.schemas.recipe_schemas import RecipeCreate, RecipeUpdate
from repositories import RecipeRepository
from services.recipe_component_service import COMPONENT_KINDS
from app.exceptions import ForbiddenError, NotFoundError, ServiceValidationError

logger = logging.getLogger("barrique.recipevault.recipe")

_SCALAR_FIELDS = (
    "title",
    "description",
    "image_url",
    "favorite",
    "time",
    "source_url",
    "servings",
    "portion_size",
)
_NON_NULLABLE = ("title", "favorite")


def _build_components(recipe: Recipe, data, replace: bool = False) -> None:
    """Attach every component list present on ``data`` to ``recipe``.

    With ``replace`` a list that is present replaces the existing collection;
    the dropped components become orphans and are deleted on flush.
    """
    for kind in COMPONENT_KINDS.values():
        items = getattr(data, kind.collection)
        if items is None:
            continue
        if replace:
            for component in list(getattr(recipe, kind.collection)):
                recipe.remove_component(component)
        for item in items:
            recipe.add_component(kind.model(**item.model_dump()))


class RecipeService:
    @staticmethod
    def get_recipes_for_user(
        db: Session, user_id: int, favorite: Optional[bool] = None
    ) -> List[Recipe]:
        return RecipeRepository(db).get_by_user_id(user_id, favorite=favorite)

    @staticmethod
    def get_recipe_by_id(db: Session, recipe_id: int) -> Optional[Recipe]:
        return RecipeRepository(db).get_by_id(recipe_id)

    @staticmethod
    def get_authorized_recipe(db: Session, recipe_id: int, user: AppUser) -> Recipe:
        """
        Load a recipe and verify that ``user`` owns it.

        Raises:
            NotFoundError: If the recipe does not exist
            ForbiddenError: If the recipe belongs to another user
        """
        recipe = RecipeRepository(db).get_by_id(recipe_id)
        if recipe is None:
            raise NotFoundError(f"Recipe not found for id: {recipe_id}")
        if recipe.user_id != user.id:
            logger.warning(
                "recipe_access_denied recipe_id=%s user_id=%s", recipe_id, user.id
            )
            raise ForbiddenError(f"Recipe {recipe_id} is not owned by the current user")
        return recipe

    @staticmethod
    def create_recipe(db: Session, user: AppUser, data: RecipeCreate) -> Recipe:
        """
        Create a recipe together with any nested components.

        Each component is attached through the recipe's add helpers so the
        back-reference is set before the single commit.
        """
        recipe = Recipe(
            user_id=user.id,
            **data.model_dump(include=set(_SCALAR_FIELDS)),
        )
        _build_components(recipe, data)
        try:
            db.add(recipe)
            db.commit()
            db.refresh(recipe)
        except Exception:
            db.rollback()
            logger.exception("Error creating recipe for user %s", user.id)
            raise

        logger.info(
            "recipe_created recipe_id=%s user_id=%s ingredients=%d steps=%d",
            recipe.recipe_id,
            user.id,
            len(recipe.ingredients),
            len(recipe.steps),
        )
        return recipe

    @staticmethod
    def update_recipe(
        db: Session, recipe_id: int, data: RecipeUpdate
    ) -> Optional[Recipe]:
        """
        Update a recipe.

        Scalar fields present in the payload are copied; a component list
        present in the payload replaces that collection.

        Returns:
            The updated recipe, or None if it does not exist

        Raises:
            ServiceValidationError: If title or favorite is set to null
        """
        repo = RecipeRepository(db)
        recipe = repo.get_by_id(recipe_id)
        if recipe is None:
            return None

        changes = data.model_dump(exclude_unset=True, include=set(_SCALAR_FIELDS))
        nulls = [k for k in _NON_NULLABLE if k in changes and changes[k] is None]
        if nulls:
            raise ServiceValidationError(
                "Recipe fields cannot be null", details={"fields": nulls}
            )

        try:
            for key, value in changes.items():
                setattr(recipe, key, value)
            _build_components(recipe, data, replace=True)
            recipe = repo.update(recipe)
        except Exception:
            db.rollback()
            logger.exception("Error updating recipe %s", recipe_id)
            raise

        logger.info("recipe_updated recipe_id=%s", recipe_id)
        return recipe

    @staticmethod
    def set_favorite(db: Session, recipe_id: int, favorite: Optional[bool] = None) -> Optional[Recipe]:
        """Set the favorite flag, or toggle it when ``favorite`` is None"""
        repo = RecipeRepository(db)
        recipe = repo.get_by_id(recipe_id)
        if recipe is None:
            return None
        recipe.favorite = (not recipe.favorite) if favorite is None else favorite
        return repo.update(recipe)

    @staticmethod
    def delete_recipe(db: Session, recipe_id: int) -> bool:
        """Delete a recipe and all of its components"""
        deleted = RecipeRepository(db).delete(recipe_id)
        logger.info("recipe_deleted recipe_id=%s deleted=%s", recipe_id, deleted)
        return deleted
