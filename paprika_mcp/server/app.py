"""
Paprika MCP Server
==================

Registers the recipe tools on a FastMCP server and serves them over stdio.

Tools:
  - list-recipes
  - search-recipes
  - get-recipe
"""

import json
import logging
from pathlib import Path
from typing import Annotated, Any, List, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, TextContent
from pydantic import Field

from paprika_mcp.core.config import Settings, get_settings
from paprika_mcp.data.loaders import FileSystemRecipeLoader
from paprika_mcp.data.store import RecipeStore
from paprika_mcp.schemas.responses import RecipeNotFound, RecipesListResponse
from paprika_mcp.server import tools

logger = logging.getLogger(__name__)


def recipe_result(response: RecipesListResponse | RecipeNotFound) -> CallToolResult:
    """Wrap a get-recipe response, flagging a missing recipe as a tool error."""
    payload = response.model_dump(exclude_none=True)
    return CallToolResult(
        content=[TextContent(type="text", text=json.dumps(payload, indent=2, ensure_ascii=False))],
        structuredContent=payload,
        isError=isinstance(response, RecipeNotFound),
    )


def build_server(store: RecipeStore, name: str, settings: Settings | None = None) -> FastMCP:
    """Create a FastMCP server whose tools answer from ``store``."""
    settings = settings or get_settings()
    server = FastMCP(name)

    @server.tool(
        name="list-recipes",
        description="Get a list of all recipes from Paprika Recipe Manager",
    )
    async def list_recipes(
        limit: Annotated[int, Field(description="Number of recipes to return")] = settings.list_limit,
    ) -> dict[str, Any]:
        response = await tools.list_recipes(store, limit=limit)
        return response.model_dump(exclude_none=True)

    @server.tool(
        name="search-recipes",
        description=(
            "Search for recipes from Paprika Recipe Manager by name, ingredients, "
            "description, or notes"
        ),
    )
    async def search_recipes(
        searchQuery: Annotated[str, Field(description="Search term to use for recipes")],
        fields: Annotated[
            Optional[List[tools.SearchField]],
            Field(
                description=(
                    "Fields to search in. Defaults to all searchable fields "
                    "(name, description, ingredients, notes)"
                )
            ),
        ] = None,
        limit: Annotated[int, Field(description="Maximum number of results to return")] = settings.search_limit,
    ) -> dict[str, Any]:
        response = await tools.search_recipes(store, searchQuery, fields=fields, limit=limit)
        return response.model_dump(exclude_none=True)

    @server.tool(
        name="get-recipe",
        description="Get the full details of one recipe from Paprika Recipe Manager by its UID",
    )
    async def get_recipe(
        uid: Annotated[str, Field(description="UID for the Recipe to get")],
    ) -> CallToolResult:
        return recipe_result(await tools.get_recipe(store, uid))

    return server


async def serve(recipes_dir: Path, server_name: str, settings: Settings | None = None) -> None:
    """Load recipes from ``recipes_dir`` and serve them until stdin closes."""
    store = RecipeStore(FileSystemRecipeLoader(recipes_dir))
    await store.load()

    server = build_server(store, server_name, settings)
    logger.info("Paprika MCP Server '%s' running on stdio", server_name)
    await server.run_stdio_async()
