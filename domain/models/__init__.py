"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    build_engine,
    init_database,
    get_db_session,
)
from domain.models.user import AppUser
from domain.models.journey import Journey, Expense
from domain.models.recipe import (
    Recipe,
    Ingredient,
    NutritionalValue,
    RecipeStep,
    Tool,
    Tag,
)

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "build_engine",
    "init_database",
    "get_db_session",
    # User models
    "AppUser",
    # BucksBuddy models
    "Journey",
    "Expense",
    # RecipeVault models
    "Recipe",
    "Ingredient",
    "NutritionalValue",
    "RecipeStep",
    "Tool",
    "Tag",
]
