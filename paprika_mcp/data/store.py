"""
In-memory recipe store backing the MCP tools.

Recipes are validated against the Recipe schema when they are inserted and
kept in a dict keyed by uid. The store is filled at startup and then only
read; there is no update or delete path.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterable, Optional

from pydantic import ValidationError

from paprika_mcp.data.loaders import RecipeLoader
from paprika_mcp.schemas.recipe import SEARCHABLE_FIELDS, Recipe, describe_validation_error

logger = logging.getLogger(__name__)


class RecipeStore:
    """
    Validated, deduplicated recipe collection.

    State goes uninitialized -> initialized (empty) -> populated. ``load()``
    may be called any number of times: the first record seen for a uid wins
    and later records with the same uid are dropped.
    """

    def __init__(self, loader: RecipeLoader, log: logging.Logger | None = None):
        self.loader = loader
        self.log = log or logger
        self._recipes: dict[str, Recipe] | None = None
        self._lock = asyncio.Lock()

    def _initialize(self) -> dict[str, Recipe]:
        if self._recipes is None:
            self._recipes = {}
        return self._recipes

    def _insert(self, recipes: dict[str, Recipe], records: Iterable[Any]) -> int:
        """Validate and insert records whose uid is not held yet. Returns the number of failures."""
        failed = 0
        for record in records:
            uid = record.get("uid") if isinstance(record, dict) else None
            if isinstance(uid, str) and uid in recipes:
                continue

            try:
                recipe = Recipe.model_validate(record)
            except ValidationError as exc:
                failed += 1
                self.log.error("  * UID %s - invalid recipe", uid if uid is not None else "unknown")
                for line in describe_validation_error(exc):
                    self.log.error("     * %s", line)
                continue

            recipes[recipe.uid] = recipe
        return failed

    async def load(self) -> int:
        """
        Pull records from the loader and insert the valid, unseen ones.

        Never raises. Returns the number of recipes held afterwards.
        """
        try:
            async with self._lock:
                recipes = self._initialize()
                records = await self.loader.load()
                failed = self._insert(recipes, records)
                if failed:
                    self.log.error("Failed to insert %d recipes during bulk insert.", failed)
        except Exception:
            self.log.exception("Error loading recipes")

        count = await self.get_count()
        self.log.info("Loaded %d recipes", count)
        return count

    async def list(self) -> list[Recipe]:
        if self._recipes is None:
            return []
        return list(self._recipes.values())

    async def get_by_uid(self, uid: str) -> Optional[Recipe]:
        if self._recipes is None:
            return None
        return self._recipes.get(uid)

    async def search(self, query: str, fields: Optional[Iterable[str]] = None) -> list[Recipe]:
        """
        Case-insensitive substring search.

        An empty or blank query matches everything. Only string values are
        compared, so listing e.g. ``rating`` in ``fields`` never matches.
        """
        if not query or not query.strip():
            return await self.list()

        search_fields = tuple(fields) if fields is not None else SEARCHABLE_FIELDS
        needle = query.lower()

        matches = []
        for recipe in await self.list():
            for field in search_fields:
                value = getattr(recipe, field, None)
                if isinstance(value, str) and needle in value.lower():
                    matches.append(recipe)
                    break
        return matches

    async def get_count(self) -> int:
        return len(self)

    async def destroy(self) -> None:
        """Drop all recipes; the store behaves as never loaded afterwards."""
        async with self._lock:
            self._recipes = None

    def __len__(self) -> int:
        return len(self._recipes) if self._recipes is not None else 0
