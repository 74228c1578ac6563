"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.user_repository import UserRepository
from repositories.journey_repository import JourneyRepository
from repositories.expense_repository import ExpenseRepository
from repositories.recipe_repository import RecipeRepository, RecipeComponentRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "JourneyRepository",
    "ExpenseRepository",
    "RecipeRepository",
    "RecipeComponentRepository",
]
