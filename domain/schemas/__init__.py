"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.user_schemas import UserCreate, UserResponse
from domain.schemas.journey_schemas import (
    JourneyCreate,
    JourneyUpdate,
    JourneyResponse,
    JourneyBudgetSummary,
    DailySpend,
    ExpenseCreate,
    ExpenseUpdate,
    ExpenseResponse,
)
from domain.schemas.recipe_schemas import (
    RecipeCreate,
    RecipeUpdate,
    RecipeResponse,
    IngredientCreate,
    IngredientUpdate,
    IngredientResponse,
    NutritionalValueCreate,
    NutritionalValueUpdate,
    NutritionalValueResponse,
    RecipeStepCreate,
    RecipeStepUpdate,
    RecipeStepResponse,
    ToolCreate,
    ToolUpdate,
    ToolResponse,
    TagCreate,
    TagUpdate,
    TagResponse,
)

__all__ = [
    # User schemas
    "UserCreate",
    "UserResponse",
    # Journey schemas
    "JourneyCreate",
    "JourneyUpdate",
    "JourneyResponse",
    "JourneyBudgetSummary",
    "DailySpend",
    # Expense schemas
    "ExpenseCreate",
    "ExpenseUpdate",
    "ExpenseResponse",
    # Recipe schemas
    "RecipeCreate",
    "RecipeUpdate",
    "RecipeResponse",
    "IngredientCreate",
    "IngredientUpdate",
    "IngredientResponse",
    "NutritionalValueCreate",
    "NutritionalValueUpdate",
    "NutritionalValueResponse",
    "RecipeStepCreate",
    "RecipeStepUpdate",
    "RecipeStepResponse",
    "ToolCreate",
    "ToolUpdate",
    "ToolResponse",
    "TagCreate",
    "TagUpdate",
    "TagResponse",
]
