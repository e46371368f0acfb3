"""
Error taxonomy for archive unpacking and record decoding.

Archive errors are fatal for an unpack run. Record errors only concern a
single archive entry: the unpacker counts them and moves on.
"""

from pathlib import Path


class PaprikaError(Exception):
    """Base class for all errors raised by paprika_mcp."""


class ArchiveError(PaprikaError):
    """The export archive as a whole cannot be used."""

    def __init__(self, path: Path | str, message: str):
        self.path = Path(path)
        super().__init__(f"{message}: {self.path}")


class ArchiveNotFoundError(ArchiveError):
    def __init__(self, path: Path | str):
        super().__init__(path, "Input file not found")


class InvalidArchiveError(ArchiveError):
    def __init__(self, path: Path | str, reason: str = "not a valid recipe archive"):
        self.reason = reason
        super().__init__(path, f"Cannot open archive ({reason})")


class RecordError(PaprikaError):
    """A single archive entry could not be turned into a recipe record."""


class RecordDecompressError(RecordError):
    pass


class RecordParseError(RecordError):
    pass


class MissingIdentifierError(RecordError):
    pass


class InvalidIdentifierError(RecordError):
    """The uid cannot be used as an output file name."""


class EntryReadError(RecordError):
    """The zip member itself could not be extracted."""
