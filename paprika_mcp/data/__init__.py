"""
Paprika MCP Data
================

- archive / normalizer / unpacker: .paprikarecipes export -> <uid>.json files
- loaders: sources of recipe records (filesystem, in-memory)
- store: validated in-memory recipe collection
"""

from .archive import ArchiveEntry, RecipeArchive, open_archive
from .loaders import FileSystemRecipeLoader, InMemoryRecipeLoader, RecipeLoader
from .normalizer import decode_record
from .store import RecipeStore
from .unpacker import UnpackResult, unpack_archive

__all__ = [
    "ArchiveEntry",
    "RecipeArchive",
    "open_archive",
    "decode_record",
    "UnpackResult",
    "unpack_archive",
    "RecipeLoader",
    "FileSystemRecipeLoader",
    "InMemoryRecipeLoader",
    "RecipeStore",
]
