"""
Paprika MCP Core
================

Core configuration, settings and errors.
"""

from .config import Settings, get_settings
from .exceptions import (
    ArchiveError,
    ArchiveNotFoundError,
    EntryReadError,
    InvalidArchiveError,
    InvalidIdentifierError,
    MissingIdentifierError,
    PaprikaError,
    RecordDecompressError,
    RecordError,
    RecordParseError,
)

__all__ = [
    "Settings",
    "get_settings",
    "PaprikaError",
    "ArchiveError",
    "ArchiveNotFoundError",
    "InvalidArchiveError",
    "RecordError",
    "RecordDecompressError",
    "RecordParseError",
    "MissingIdentifierError",
    "InvalidIdentifierError",
    "EntryReadError",
]
