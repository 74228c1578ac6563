"""Services package - Business logic layer"""

from services.user_service import UserService
from services.journey_service import JourneyService
from services.expense_service import ExpenseService
from services.recipe_component_service import RecipeComponentService, COMPONENT_KINDS
from services.recipe_service import RecipeService

__all__ = [
    "UserService",
    "JourneyService",
    "ExpenseService",
    "RecipeService",
    "RecipeComponentService",
    "COMPONENT_KINDS",
]
