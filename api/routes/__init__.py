"""API routes package"""

from . import health, users, journeys, expenses, recipes, recipe_components

__all__ = ["health", "users", "journeys", "expenses", "recipes", "recipe_components"]
