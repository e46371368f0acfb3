"""
Response Schemas
================

Structured payloads returned by the MCP tools.
Ensures consistent projections of stored recipes across tools.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field

from .recipe import Recipe


class RecipeSummary(BaseModel):
    """Reduced projection used by list and search results."""

    uid: str
    name: str
    description: Optional[str] = None
    categories: Optional[List[str]] = None
    total_time: Optional[str] = None
    difficulty: Optional[str] = None

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> "RecipeSummary":
        return cls.model_validate(recipe.model_dump(include=set(cls.model_fields)))


class RecipeDetail(BaseModel):
    """Full-detail projection returned by get-recipe (no photo payloads)."""

    uid: str
    name: str
    description: Optional[str] = None
    ingredients: Optional[str] = None
    directions: Optional[str] = None
    notes: Optional[str] = None
    nutritional_info: Optional[str] = None
    prep_time: Optional[str] = None
    cook_time: Optional[str] = None
    total_time: Optional[str] = None
    servings: Optional[str] = None
    difficulty: Optional[str] = None
    rating: Optional[float] = None
    categories: Optional[List[str]] = None
    source: Optional[str] = None
    source_url: Optional[str] = None

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> "RecipeDetail":
        return cls.model_validate(recipe.model_dump(include=set(cls.model_fields)))


class RecipesListResponse(BaseModel):
    """
    Recipes returned by a tool call.

    ``count`` is the number of recipes that matched, which can be larger
    than ``len(recipes)`` when the caller asked for a limit.
    """

    recipes: List[Union[RecipeDetail, RecipeSummary]] = Field(default_factory=list)
    count: int = 0


class RecipeNotFound(BaseModel):
    """Structured not-found answer for get-recipe."""

    error: str
