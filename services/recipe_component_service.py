"""
Recipe component service - CRUD for the child records of a recipe.

Ingredients, nutritional values, steps, tools and tags share one shape: each
belongs to exactly one recipe, is reached through its recipe's ownership, and
is created, updated and deleted the same way as a journey's expenses.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Type
from pydantic import BaseModel
from sqlalchemy.orm import Session
import logging

from domain.models import Ingredient, NutritionalValue, RecipeStep, Tool, Tag
from repositories import RecipeComponentRepository, RecipeRepository
from app.exceptions import NotFoundError, ServiceValidationError

logger = logging.getLogger("barrique.recipevault.component")


@dataclass(frozen=True)
class ComponentKind:
    """Describes one kind of recipe component"""

    path: str  # URL segment, e.g. "nutritional-values"
    label: str
    model: Type
    fields: Tuple[str, ...]
    required: Tuple[str, ...] = ()

    @property
    def collection(self) -> str:
        """Name of the matching collection on Recipe"""
        return self.model.collection

    @property
    def id_attr(self) -> str:
        return self.model.__mapper__.primary_key[0].key

COMPONENT_KINDS: Dict[str, ComponentKind] = {
    kind.path: kind
    for kind in (
        ComponentKind("ingredients", "Ingredient", Ingredient, ("name", "quantity", "unit"), ("name",)),
        ComponentKind(
            "nutritional-values",
            "Nutritional value",
            NutritionalValue,
            ("name", "amount", "unit"),
            ("name",),
        ),
        ComponentKind("steps", "Step", RecipeStep, ("step_description", "step_number")),
        ComponentKind("tools", "Tool", Tool, ("name",), ("name",)),
        ComponentKind("tags", "Tag", Tag, ("name",), ("name",)),
    )
}


class RecipeComponentService:
    @staticmethod
    def list_components(
        db: Session, kind: ComponentKind, recipe_id: int, user_id: int
    ) -> List:
        """Components of a recipe, only if the recipe belongs to ``user_id``"""
        return RecipeComponentRepository(db, kind.model).find_all_by_recipe_and_user(
            recipe_id, user_id
        )

    @staticmethod
    def get_component(db: Session, kind: ComponentKind, component_id: int):
        return RecipeComponentRepository(db, kind.model).get_by_id(component_id)

    @staticmethod
    def create_component(
        db: Session, kind: ComponentKind, recipe_id: int, data: BaseModel
    ):
        """
        Create a component under a recipe via the recipe's add helper.

        Raises:
            NotFoundError: If the recipe does not exist
        """
        recipe = RecipeRepository(db).get_by_id(recipe_id)
        if recipe is None:
            raise NotFoundError(
                f"Recipe not found for id: {recipe_id}",
                details={"recipe_id": recipe_id},
            )

        component = kind.model(**data.model_dump(include=set(kind.fields)))
        try:
            recipe.add_component(component)
            db.add(component)
            db.commit()
            db.refresh(component)
        except Exception:
            db.rollback()
            logger.exception("Error creating %s for recipe %s", kind.label, recipe_id)
            raise

        logger.info(
            "component_created kind=%s id=%s recipe_id=%s",
            kind.path,
            getattr(component, kind.id_attr),
            recipe_id,
        )
        return component

    @staticmethod
    def update_component(
        db: Session, kind: ComponentKind, component_id: int, data: BaseModel
    ):
        """
        Copy the fields present in ``data`` onto an existing component.

        Returns:
            The updated component, or None if it does not exist

        Raises:
            ServiceValidationError: If a required field is set to null
        """
        repo = RecipeComponentRepository(db, kind.model)
        component = repo.get_by_id(component_id)
        if component is None:
            return None

        changes = data.model_dump(exclude_unset=True, include=set(kind.fields))
        nulls = [k for k in kind.required if k in changes and changes[k] is None]
        if nulls:
            raise ServiceValidationError(
                f"{kind.label} fields cannot be null", details={"fields": nulls}
            )

        for key, value in changes.items():
            setattr(component, key, value)
        component = repo.update(component)
        logger.info("component_updated kind=%s id=%s", kind.path, component_id)
        return component

    @staticmethod
    def delete_component(db: Session, kind: ComponentKind, component_id: int) -> bool:
        """Delete a component after detaching it from its recipe's collection"""
        component = RecipeComponentRepository(db, kind.model).get_by_id(component_id)
        if component is None:
            return False

        recipe = component.recipe
        try:
            if recipe is not None:
                recipe.remove_component(component)
            db.delete(component)
            db.commit()
        except Exception:
            db.rollback()
            logger.exception("Error deleting %s %s", kind.label, component_id)
            raise

        logger.info("component_deleted kind=%s id=%s", kind.path, component_id)
        return True
