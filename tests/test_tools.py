"""
Tests for the MCP tool handlers and their FastMCP registration.
"""

import json

import pytest

from paprika_mcp.core.config import Settings
from paprika_mcp.data.loaders import InMemoryRecipeLoader
from paprika_mcp.data.store import RecipeStore
from paprika_mcp.schemas.responses import RecipeDetail, RecipeNotFound, RecipeSummary
from paprika_mcp.server import build_server, tools
from paprika_mcp.server.app import recipe_result

SUMMARY_KEYS = {"uid", "name", "description", "categories", "total_time", "difficulty"}


@pytest.mark.asyncio
async def test_list_recipes_projects_summaries(store: RecipeStore):
    response = await tools.list_recipes(store)

    assert response.count == 2
    assert all(isinstance(r, RecipeSummary) for r in response.recipes)
    dumped = response.model_dump(exclude_none=True)
    assert set(dumped["recipes"][0]) <= SUMMARY_KEYS
    assert "ingredients" not in dumped["recipes"][0]


@pytest.mark.asyncio
async def test_list_limit_keeps_total_count(store: RecipeStore):
    response = await tools.list_recipes(store, limit=1)

    assert len(response.recipes) == 1
    assert response.count == 2


@pytest.mark.asyncio
async def test_search_recipes_counts_before_truncation():
    many = [{"uid": f"soup-{i}", "name": f"Soup {i}"} for i in range(15)]
    many_store = RecipeStore(InMemoryRecipeLoader(many))
    await many_store.load()

    response = await tools.search_recipes(many_store, "soup")

    assert len(response.recipes) == tools.DEFAULT_SEARCH_LIMIT
    assert response.count == 15


@pytest.mark.asyncio
async def test_search_recipes_fields(store: RecipeStore):
    response = await tools.search_recipes(store, "notes", fields=["name"])
    assert response.count == 0

    response = await tools.search_recipes(store, "notes", fields=["notes"])
    assert response.count == 2


@pytest.mark.asyncio
async def test_get_recipe_returns_detail(full_recipe):
    detail_store = RecipeStore(InMemoryRecipeLoader([full_recipe]))
    await detail_store.load()

    response = await tools.get_recipe(detail_store, "full-recipe-uid")

    assert response.count == 1
    detail = response.recipes[0]
    assert isinstance(detail, RecipeDetail)
    dumped = response.model_dump(exclude_none=True)["recipes"][0]
    assert dumped["directions"] == "Step 1\nStep 2"
    assert dumped["rating"] == 4
    assert dumped["source_url"] == "https://example.com/recipe"
    assert "photos" not in dumped
    assert "photo_data" not in dumped


@pytest.mark.asyncio
async def test_get_recipe_not_found(store: RecipeStore):
    response = await tools.get_recipe(store, "missing")

    assert isinstance(response, RecipeNotFound)
    assert response.error == "Recipe with UID missing not found"


@pytest.mark.asyncio
async def test_server_registers_recipe_tools(store: RecipeStore):
    server = build_server(store, "paprika-test", Settings())

    registered = {tool.name: tool for tool in await server.list_tools()}

    assert set(registered) == {"list-recipes", "search-recipes", "get-recipe"}
    search_schema = registered["search-recipes"].inputSchema
    assert "searchQuery" in search_schema["properties"]
    assert search_schema["required"] == ["searchQuery"]
    assert registered["get-recipe"].inputSchema["required"] == ["uid"]


@pytest.mark.asyncio
async def test_get_recipe_result_flags_missing_uid_as_error(store: RecipeStore):
    result = recipe_result(await tools.get_recipe(store, "missing"))

    assert result.isError is True
    assert result.structuredContent == {"error": "Recipe with UID missing not found"}
    assert json.loads(result.content[0].text) == {"error": "Recipe with UID missing not found"}


@pytest.mark.asyncio
async def test_get_recipe_result_for_known_uid(store: RecipeStore):
    uid = (await store.list())[0].uid

    result = recipe_result(await tools.get_recipe(store, uid))

    assert result.isError is False
    payload = json.loads(result.content[0].text)
    assert payload["count"] == 1
    assert payload["recipes"][0]["uid"] == uid
    assert result.structuredContent == payload
