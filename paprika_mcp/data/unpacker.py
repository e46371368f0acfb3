"""
Unpacks a Paprika export archive into one ``<uid>.json`` file per recipe.

A bad entry never stops the run: it is logged, counted, and skipped. Files
written before a failure stay on disk. When two entries share a uid, the
later one overwrites the earlier file.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from paprika_mcp.core.exceptions import InvalidIdentifierError, RecordError
from paprika_mcp.data.archive import ArchiveEntry, open_archive
from paprika_mcp.data.normalizer import decode_record

logger = logging.getLogger(__name__)

RECORD_FILE_SUFFIX = ".json"


@dataclass
class UnpackResult:
    processed: int = 0
    errors: int = 0


def record_path(output_dir: Path, uid: str) -> Path:
    """Output file for a uid, refusing names that leave ``output_dir``."""
    if uid in (".", "..") or "/" in uid or "\\" in uid or "\x00" in uid:
        raise InvalidIdentifierError(f"UID {uid!r} cannot be used as a file name")
    return output_dir / f"{uid}{RECORD_FILE_SUFFIX}"


def dump_record(record: dict[str, Any]) -> str:
    return json.dumps(record, indent=2, ensure_ascii=False)


async def _convert_entry(entry: ArchiveEntry, output_dir: Path) -> tuple[Path, dict[str, Any]]:
    raw = await entry.read()
    record = await asyncio.to_thread(decode_record, raw)
    target = record_path(output_dir, record["uid"])
    await asyncio.to_thread(target.write_text, dump_record(record), encoding="utf-8")
    return target, record


async def unpack_archive(
    archive_path: Path | str,
    output_dir: Path | str,
    verbose: bool = False,
    log: logging.Logger | None = None,
) -> UnpackResult:
    """
    Convert every ``.paprikarecipe`` entry of an export to pretty-printed JSON.

    Raises ArchiveError before anything is written if the archive is missing
    or unreadable. Per-entry failures are only counted in the result.
    """
    log = log or logger
    entry_level = logging.INFO if verbose else logging.DEBUG
    output_dir = Path(output_dir)

    with open_archive(archive_path) as archive:
        log.log(entry_level, "Unpacking %s into %s", archive.path, output_dir)
        await asyncio.to_thread(output_dir.mkdir, parents=True, exist_ok=True)

        result = UnpackResult()
        for entry in archive.recipe_entries():
            try:
                target, record = await _convert_entry(entry, output_dir)
            except RecordError as exc:
                result.errors += 1
                log.error("Skipping %s: %s", entry.path, exc)
                continue
            except OSError as exc:
                result.errors += 1
                log.error("Error processing %s: %s", entry.path, exc)
                continue

            result.processed += 1
            log.log(entry_level, "Converted %s -> %s (%s)", entry.path, target.name, record.get("name"))

    log.info("Unpacking complete: %d processed, %d errors", result.processed, result.errors)
    return result
