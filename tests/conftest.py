"""
Shared fixtures: sample recipes, export archive builder, loaded store.
"""

from __future__ import annotations

import gzip
import json
import struct
import zipfile
from pathlib import Path
from typing import Any, Callable

import pytest
import pytest_asyncio

from paprika_mcp.core.config import get_settings
from paprika_mcp.data.loaders import InMemoryRecipeLoader
from paprika_mcp.data.store import RecipeStore

RECIPE_1 = {
    "uid": "03D38552-8562-46F9-BA8E-97D5D27ACE0C",
    "name": "Recipe 1",
    "description": "Description",
    "ingredients": "Ingredient 1\nIngredient 2",
    "notes": "Notes",
    "source": "source.com",
}

RECIPE_2 = {
    "uid": "56B5F1BC-B382-444C-85A9-F2AFDD0A875E",
    "name": "Recipe 2",
    "description": "Description",
    "ingredients": "Ingredient 1\nIngredient 2",
    "notes": "Notes",
    "source": "source.com",
}

FULL_RECIPE = {
    "uid": "full-recipe-uid",
    "name": "Full Recipe",
    "ingredients": "Ingredient 1\nIngredient 2",
    "directions": "Step 1\nStep 2",
    "description": "A detailed description",
    "notes": "Some notes",
    "nutritional_info": "Calories: 200",
    "prep_time": "10m",
    "cook_time": "20m",
    "total_time": "30m",
    "servings": "4",
    "difficulty": "Medium",
    "rating": 4,
    "categories": ["Dinner", "Quick"],
    "source": "Test Source",
    "source_url": "https://example.com/recipe",
    "image_url": "https://example.com/image.jpg",
    "photo": "photo-hash",
    "created": "2026-02-08 12:00:00",
    "hash": "recipe-hash",
    "photo_hash": "photo-hash",
    "photo_large": None,
    "photo_data": "base64-encoded-data",
    "photos": [{"data": "photo1"}, {"data": "photo2"}],
}


def _gzip_record(record: Any) -> bytes:
    return gzip.compress(json.dumps(record).encode("utf-8"))


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_recipes() -> list[dict[str, Any]]:
    return [dict(RECIPE_1), dict(RECIPE_2)]


@pytest_asyncio.fixture
async def store(sample_recipes):
    recipe_store = RecipeStore(InMemoryRecipeLoader(sample_recipes))
    await recipe_store.load()
    yield recipe_store
    await recipe_store.destroy()


@pytest.fixture
def make_archive(tmp_path: Path) -> Callable[..., Path]:
    """Build a zip export from ``{entry name: bytes}``; names ending in ``/`` become directories."""

    def _make(
        entries: dict[str, bytes],
        name: str = "export.paprikarecipes",
        compression: int = zipfile.ZIP_STORED,
    ) -> Path:
        path = tmp_path / name
        with zipfile.ZipFile(path, "w", compression=compression) as archive:
            for entry_name, data in entries.items():
                archive.writestr(entry_name, data)
        return path

    return _make


@pytest.fixture
def gzip_record() -> Callable[[Any], bytes]:
    """Encode a record the way Paprika stores a .paprikarecipe entry."""
    return _gzip_record


@pytest.fixture
def full_recipe() -> dict[str, Any]:
    return json.loads(json.dumps(FULL_RECIPE))


@pytest.fixture
def corrupt_member() -> Callable[[Path, str], None]:
    """Overwrite the first compressed byte of one archive member."""

    def _corrupt(path: Path, entry_name: str) -> None:
        with zipfile.ZipFile(path) as archive:
            info = archive.getinfo(entry_name)
        data = bytearray(path.read_bytes())
        # Local file header: 30 fixed bytes, then the name and extra field.
        name_len, extra_len = struct.unpack_from("<HH", data, info.header_offset + 26)
        data_offset = info.header_offset + 30 + name_len + extra_len
        # 0xff sets deflate block type 3, which zlib rejects.
        data[data_offset] = 0xFF
        path.write_bytes(bytes(data))

    return _corrupt
