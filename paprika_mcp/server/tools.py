"""
MCP tool handlers.

Each handler takes the RecipeStore plus the tool arguments and returns a
response model. Truncation to ``limit`` happens here; ``count`` always
reports how many recipes matched before truncation.
"""

from __future__ import annotations

from typing import Literal, Optional, Sequence, Union

from paprika_mcp.data.store import RecipeStore
from paprika_mcp.schemas.responses import RecipeDetail, RecipeNotFound, RecipeSummary, RecipesListResponse

SearchField = Literal["name", "description", "ingredients", "notes"]

DEFAULT_LIST_LIMIT = 200
DEFAULT_SEARCH_LIMIT = 10


def _summaries(recipes, limit: int) -> RecipesListResponse:
    return RecipesListResponse(
        recipes=[RecipeSummary.from_recipe(r) for r in recipes[: max(limit, 0)]],
        count=len(recipes),
    )


async def list_recipes(store: RecipeStore, limit: int = DEFAULT_LIST_LIMIT) -> RecipesListResponse:
    return _summaries(await store.list(), limit)


async def search_recipes(
    store: RecipeStore,
    search_query: str,
    fields: Optional[Sequence[SearchField]] = None,
    limit: int = DEFAULT_SEARCH_LIMIT,
) -> RecipesListResponse:
    return _summaries(await store.search(search_query, fields), limit)


async def get_recipe(store: RecipeStore, uid: str) -> Union[RecipesListResponse, RecipeNotFound]:
    recipe = await store.get_by_uid(uid)
    if recipe is None:
        return RecipeNotFound(error=f"Recipe with UID {uid} not found")
    return RecipesListResponse(recipes=[RecipeDetail.from_recipe(recipe)], count=1)
