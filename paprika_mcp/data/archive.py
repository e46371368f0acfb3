"""
Reader for Paprika export archives.

A ``.paprikarecipes`` export is a zip container holding one gzip-compressed
``.paprikarecipe`` JSON document per recipe.
"""

from __future__ import annotations

import asyncio
import logging
import zipfile
import zlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from paprika_mcp.core.exceptions import ArchiveNotFoundError, EntryReadError, InvalidArchiveError

logger = logging.getLogger(__name__)

RECIPE_ENTRY_SUFFIX = ".paprikarecipe"


@dataclass(frozen=True)
class ArchiveEntry:
    """One member of the container. Bytes are only read on demand."""

    path: str
    is_dir: bool
    _archive: zipfile.ZipFile = field(repr=False, compare=False)

    @property
    def is_file(self) -> bool:
        return not self.is_dir

    @property
    def is_recipe(self) -> bool:
        return self.is_file and self.path.endswith(RECIPE_ENTRY_SUFFIX)

    async def read(self) -> bytes:
        """
        Read the raw (still gzip-compressed) entry bytes.

        Raises EntryReadError when the member cannot be extracted: corrupt
        deflate data, a CRC mismatch, encryption or an unsupported method.
        """
        try:
            return await asyncio.to_thread(self._archive.read, self.path)
        except (zlib.error, EOFError, RuntimeError, NotImplementedError, zipfile.BadZipFile) as exc:
            raise EntryReadError(f"Cannot read archive entry: {exc}") from exc


class RecipeArchive:
    """Open export archive. Use as a context manager to close it."""

    def __init__(self, path: Path, archive: zipfile.ZipFile):
        self.path = path
        self._archive = archive

    def entries(self) -> Iterator[ArchiveEntry]:
        """Every entry, directories included, in archive order."""
        for info in self._archive.infolist():
            yield ArchiveEntry(path=info.filename, is_dir=info.is_dir(), _archive=self._archive)

    def recipe_entries(self) -> Iterator[ArchiveEntry]:
        """Regular files ending in ``.paprikarecipe``; everything else is skipped."""
        for entry in self.entries():
            if entry.is_recipe:
                yield entry
            else:
                logger.debug("Skipping archive entry %s", entry.path)

    def close(self) -> None:
        self._archive.close()

    def __enter__(self) -> "RecipeArchive":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def open_archive(path: Path | str) -> RecipeArchive:
    """
    Open a Paprika export archive.

    Raises ArchiveNotFoundError if the path does not exist and
    InvalidArchiveError if it is not a readable zip container.
    """
    archive_path = Path(path)
    if not archive_path.exists():
        raise ArchiveNotFoundError(archive_path)

    try:
        archive = zipfile.ZipFile(archive_path)
    except zipfile.BadZipFile as exc:
        raise InvalidArchiveError(archive_path, str(exc)) from exc
    except IsADirectoryError as exc:
        raise InvalidArchiveError(archive_path, "is a directory") from exc

    return RecipeArchive(archive_path, archive)
