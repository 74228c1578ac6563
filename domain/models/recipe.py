"""
RecipeVault models: recipes and their structured components.
"""

from sqlalchemy import (
    Column,
    Integer,
    Text,
    Boolean,
    ForeignKey,
    Numeric,
)
from sqlalchemy.orm import relationship

from domain.models.database import Base


class Recipe(Base):
    """A cooking record owned by a user"""

    __tablename__ = "recipe"

    recipe_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("app_user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(Text, nullable=False)
    description = Column(Text)
    image_url = Column(Text)
    favorite = Column(Boolean, nullable=False, default=False)
    time = Column(Text)
    source_url = Column(Text)
    servings = Column(Integer)
    portion_size = Column(Integer)

    user = relationship("AppUser", back_populates="recipes")
    ingredients = relationship(
        "Ingredient",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="Ingredient.ingredient_id",
    )
    nutritional_values = relationship(
        "NutritionalValue",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="NutritionalValue.nutritional_value_id",
    )
    steps = relationship(
        "RecipeStep",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="RecipeStep.step_number",
    )
    tools = relationship(
        "Tool",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="Tool.tool_id",
    )
    tags = relationship(
        "Tag",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="Tag.tag_id",
    )

    # Helper methods
    def add_ingredient(self, ingredient: "Ingredient") -> None:
        self._attach(self.ingredients, ingredient)

    def add_nutritional_value(self, nutritional_value: "NutritionalValue") -> None:
        self._attach(self.nutritional_values, nutritional_value)

    def add_step(self, step: "RecipeStep") -> None:
        self._attach(self.steps, step)

    def add_tool(self, tool: "Tool") -> None:
        self._attach(self.tools, tool)

    def add_tag(self, tag: "Tag") -> None:
        self._attach(self.tags, tag)

    def remove_ingredient(self, ingredient: "Ingredient") -> None:
        self.remove_component(ingredient)

    def remove_nutritional_value(self, nutritional_value: "NutritionalValue") -> None:
        self.remove_component(nutritional_value)

    def remove_step(self, step: "RecipeStep") -> None:
        self.remove_component(step)

    def remove_tool(self, tool: "Tool") -> None:
        self.remove_component(tool)

    def remove_tag(self, tag: "Tag") -> None:
        self.remove_component(tag)

    def add_component(self, component) -> None:
        """Attach any component to the collection matching its type"""
        self._attach(getattr(self, component.collection), component)

    def remove_component(self, component) -> None:
        """Detach a component; with delete-orphan it is deleted on flush"""
        collection = getattr(self, component.collection)
        if component in collection:
            collection.remove(component)
        component.recipe = None

    def _attach(self, collection, component) -> None:
        if component not in collection:
            collection.append(component)
        component.recipe = self

    def __repr__(self) -> str:
        return f"<Recipe(recipe_id={self.recipe_id}, title={self.title})>"


class Ingredient(Base):
    """Ingredient line of a recipe"""

    __tablename__ = "ingredient"
    collection = "ingredients"

    ingredient_id = Column(Integer, primary_key=True, autoincrement=True)
    recipe_id = Column(
        Integer,
        ForeignKey("recipe.recipe_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(Text, nullable=False)
    quantity = Column(Numeric(10, 2))
    unit = Column(Text)

    recipe = relationship("Recipe", back_populates="ingredients")


class NutritionalValue(Base):
    """Nutrient amount of a recipe (e.g. protein 25 g)"""

    __tablename__ = "nutritional_value"
    collection = "nutritional_values"

    nutritional_value_id = Column(Integer, primary_key=True, autoincrement=True)
    recipe_id = Column(
        Integer,
        ForeignKey("recipe.recipe_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(Text, nullable=False)
    amount = Column(Numeric(10, 2))
    unit = Column(Text)

    recipe = relationship("Recipe", back_populates="nutritional_values")


class RecipeStep(Base):
    """Numbered preparation step"""

    __tablename__ = "recipe_step"
    collection = "steps"

    step_id = Column(Integer, primary_key=True, autoincrement=True)
    recipe_id = Column(
        Integer,
        ForeignKey("recipe.recipe_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    step_description = Column(Text)
    step_number = Column(Integer)

    recipe = relationship("Recipe", back_populates="steps")


class Tool(Base):
    """Kitchen tool needed for a recipe"""

    __tablename__ = "tool"
    collection = "tools"

    tool_id = Column(Integer, primary_key=True, autoincrement=True)
    recipe_id = Column(
        Integer,
        ForeignKey("recipe.recipe_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(Text, nullable=False)

    recipe = relationship("Recipe", back_populates="tools")


class Tag(Base):
    """Free-form label on a recipe"""

    __tablename__ = "tag"
    collection = "tags"

    tag_id = Column(Integer, primary_key=True, autoincrement=True)
    recipe_id = Column(
        Integer,
        ForeignKey("recipe.recipe_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(Text, nullable=False)

    recipe = relationship("Recipe", back_populates="tags")
