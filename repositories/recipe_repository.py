"""
Recipe Repository - Data access layer for recipes and their components
"""

from typing import List, Optional, Type
from sqlalchemy.orm import Session

from repositories.base import BaseRepository, ModelType
from domain.models import Recipe, RecipeStep


class RecipeRepository(BaseRepository[Recipe]):
    """Repository for recipe data access"""

    def __init__(self, db: Session):
        super().__init__(db, Recipe)

    def get_by_user_id(self, user_id: int, favorite: Optional[bool] = None) -> List[Recipe]:
        """Get a user's recipes, optionally only (non-)favorites"""
        query = self.db.query(Recipe).filter(Recipe.user_id == user_id)
        if favorite is not None:
            query = query.filter(Recipe.favorite == favorite)
        return query.order_by(Recipe.title, Recipe.recipe_id).all()


class RecipeComponentRepository(BaseRepository[ModelType]):
    """Repository for one kind of recipe component (ingredient, step, tool, ...)"""

    def __init__(self, db: Session, model: Type[ModelType]):
        super().__init__(db, model)

    def find_all_by_recipe_and_user(self, recipe_id: int, user_id: int) -> List[ModelType]:
        """Components of a recipe, restricted to recipes owned by ``user_id``"""
        order = [self.primary_key]
        if self.model is RecipeStep:
            order.insert(0, RecipeStep.step_number)
        return self._owned_children(Recipe, recipe_id, user_id).order_by(*order).all()
