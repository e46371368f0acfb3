"""
Paprika MCP Schemas
===================

Pydantic schemas for structured data.

- recipe: Recipe, Photo (validated at store insertion)
- responses: RecipesListResponse, RecipeSummary, RecipeDetail, RecipeNotFound
"""

from .recipe import Photo, Recipe, SEARCHABLE_FIELDS, describe_validation_error
from .responses import (
    RecipeDetail,
    RecipeNotFound,
    RecipeSummary,
    RecipesListResponse,
)

__all__ = [
    "Photo",
    "Recipe",
    "SEARCHABLE_FIELDS",
    "describe_validation_error",
    "RecipeDetail",
    "RecipeNotFound",
    "RecipeSummary",
    "RecipesListResponse",
]
