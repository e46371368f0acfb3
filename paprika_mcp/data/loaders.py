"""
Recipe loaders for the MCP server.

A loader produces the raw recipe records that seed a RecipeStore. The store
only knows the RecipeLoader interface, so the backing source (a directory of
unpacked JSON files, a fixed list in tests, later an HTTP sync) can be swapped
without touching the store.
"""

from __future__ import annotations

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

RECORD_FILE_SUFFIX = ".json"


class RecipeLoader(ABC):
    """Interface for loading recipes from different backends."""

    @abstractmethod
    async def load(self) -> list[dict[str, Any]]:
        """Return every recipe record currently available from the backend."""


class FileSystemRecipeLoader(RecipeLoader):
    """Loads recipes from ``*.json`` files in a local directory (one recipe per file)."""

    def __init__(self, recipes_dir: Path | str, log: logging.Logger | None = None):
        self.recipes_dir = Path(recipes_dir)
        self.log = log or logger

    def _read_file(self, path: Path) -> Any:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    async def load(self) -> list[dict[str, Any]]:
        if not self.recipes_dir.is_dir():
            self.log.error("Recipes directory not found: %s", self.recipes_dir)
            return []

        paths = await asyncio.to_thread(
            lambda: [
                p for p in self.recipes_dir.iterdir()
                if p.name.endswith(RECORD_FILE_SUFFIX) and p.is_file()
            ]
        )

        recipes: list[dict[str, Any]] = []
        for path in paths:
            try:
                recipes.append(await asyncio.to_thread(self._read_file, path))
            except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
                self.log.error("Error loading recipe %s: %s", path.name, exc)

        self.log.debug("Read %d recipe files from %s", len(recipes), self.recipes_dir)
        return recipes


class InMemoryRecipeLoader(RecipeLoader):
    """
    Returns a fixed list of records.

    Used as a test double and for embedding the store in other programs.
    """

    def __init__(self, recipes: list[dict[str, Any]]):
        self.recipes = recipes

    async def load(self) -> list[dict[str, Any]]:
        return list(self.recipes)
