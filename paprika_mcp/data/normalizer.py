"""
Turns the bytes of one ``.paprikarecipe`` entry into a recipe record.

The record stays a plain mapping here. Field-level validation belongs to
RecipeStore; this step only guarantees the record carries a usable ``uid``.
"""

import gzip
import json
import zlib
from typing import Any

from paprika_mcp.core.exceptions import MissingIdentifierError, RecordDecompressError, RecordParseError


def decompress_entry(data: bytes) -> bytes:
    try:
        return gzip.decompress(data)
    except (OSError, EOFError, zlib.error) as exc:
        raise RecordDecompressError(f"gzip decompression failed: {exc}") from exc


def parse_record(payload: bytes) -> dict[str, Any]:
    try:
        record = json.loads(payload.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise RecordParseError(f"malformed recipe JSON: {exc}") from exc

    if not isinstance(record, dict):
        raise RecordParseError(f"expected a JSON object, got {type(record).__name__}")
    return record


def decode_record(data: bytes) -> dict[str, Any]:
    """Decompress, parse and check the identifier of one archive entry."""
    record = parse_record(decompress_entry(data))

    uid = record.get("uid")
    if not isinstance(uid, str) or not uid:
        raise MissingIdentifierError("No UID field found")
    return record
