"""Pydantic schemas for recipes and their components."""

from pydantic import BaseModel, Field
from typing import List, Optional
from decimal import Decimal


# ---------------------------------------------------------------------------
# Components
# ---------------------------------------------------------------------------


class IngredientCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    quantity: Optional[Decimal] = Field(None, ge=0)
    unit: Optional[str] = Field(None, max_length=50)


class IngredientUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    quantity: Optional[Decimal] = Field(None, ge=0)
    unit: Optional[str] = Field(None, max_length=50)


class IngredientResponse(BaseModel):
    ingredient_id: int
    recipe_id: int
    name: str
    quantity: Optional[Decimal] = None
    unit: Optional[str] = None

    model_config = {"from_attributes": True}


class NutritionalValueCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, description="Nutrient, e.g. 'protein'")
    amount: Optional[Decimal] = Field(None, ge=0)
    unit: Optional[str] = Field(None, max_length=50)


class NutritionalValueUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    amount: Optional[Decimal] = Field(None, ge=0)
    unit: Optional[str] = Field(None, max_length=50)


class NutritionalValueResponse(BaseModel):
    nutritional_value_id: int
    recipe_id: int
    name: str
    amount: Optional[Decimal] = None
    unit: Optional[str] = None

    model_config = {"from_attributes": True}


class RecipeStepCreate(BaseModel):
    step_description: Optional[str] = None
    step_number: Optional[int] = Field(None, ge=1, description="Ordering key within the recipe")


class RecipeStepUpdate(BaseModel):
    step_description: Optional[str] = None
    step_number: Optional[int] = Field(None, ge=1)


class RecipeStepResponse(BaseModel):
    step_id: int
    recipe_id: int
    step_description: Optional[str] = None
    step_number: Optional[int] = None

    model_config = {"from_attributes": True}


class ToolCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)


class ToolUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)


class ToolResponse(BaseModel):
    tool_id: int
    recipe_id: int
    name: str

    model_config = {"from_attributes": True}


class TagCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


class TagUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)


class TagResponse(BaseModel):
    tag_id: int
    recipe_id: int
    name: str

    model_config = {"from_attributes": True}


# ---------------------------------------------------------------------------
# Recipes
# ---------------------------------------------------------------------------


class RecipeCreate(BaseModel):
    """Recipe with optional nested components, created in one call"""

    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    image_url: Optional[str] = None
    favorite: bool = False
    time: Optional[str] = Field(None, max_length=50, description="Preparation time, e.g. '45 min'")
    source_url: Optional[str] = None
    servings: Optional[int] = Field(None, ge=0)
    portion_size: Optional[int] = Field(None, ge=0)

    ingredients: List[IngredientCreate] = []
    nutritional_values: List[NutritionalValueCreate] = []
    steps: List[RecipeStepCreate] = []
    tools: List[ToolCreate] = []
    tags: List[TagCreate] = []


class RecipeUpdate(BaseModel):
    """Partial recipe update.

    Scalar fields that are sent overwrite the stored values. A component list
    that is sent replaces the whole collection; omitted lists are untouched.
    """

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    image_url: Optional[str] = None
    favorite: Optional[bool] = None
    time: Optional[str] = Field(None, max_length=50)
    source_url: Optional[str] = None
    servings: Optional[int] = Field(None, ge=0)
    portion_size: Optional[int] = Field(None, ge=0)

    ingredients: Optional[List[IngredientCreate]] = None
    nutritional_values: Optional[List[NutritionalValueCreate]] = None
    steps: Optional[List[RecipeStepCreate]] = None
    tools: Optional[List[ToolCreate]] = None
    tags: Optional[List[TagCreate]] = None


class RecipeResponse(BaseModel):
    recipe_id: int
    user_id: int
    title: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    favorite: bool = False
    time: Optional[str] = None
    source_url: Optional[str] = None
    servings: Optional[int] = None
    portion_size: Optional[int] = None

    ingredients: List[IngredientResponse] = []
    nutritional_values: List[NutritionalValueResponse] = []
    steps: List[RecipeStepResponse] = []
    tools: List[ToolResponse] = []
    tags: List[TagResponse] = []

    model_config = {"from_attributes": True}
