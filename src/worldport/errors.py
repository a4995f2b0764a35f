"""Exception hierarchy for worldport.

Every failure the pipeline can report is one of the classes below. Errors
raised by collaborators (loaders, converters, storage writers) are converted
with the matching ``from_cause`` constructor so the original exception stays
reachable through ``__cause__``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Self


class WorldportError(Exception):
    """Base exception for all pipeline errors."""

    kind = "Error"
    exit_code = 1

    @classmethod
    def from_cause(cls, exc: BaseException) -> Self:
        """Build an error of this kind around an underlying exception."""
        message = str(exc) or type(exc).__name__
        error = cls(message)
        error.__cause__ = exc
        return error


class ConfigParseError(WorldportError):
    """Configuration text is malformed or fails validation."""

    kind = "Error Parsing Config"


class FileError(WorldportError):
    """Directory/file creation or I/O failed."""

    kind = "File Error"


class MissingFileError(WorldportError):
    """Resolved input path does not exist."""

    kind = "Missing File"

    def __init__(self, path: Path | str) -> None:
        super().__init__(f"Could not find {path}")
        self.path = Path(path)


class LevelLoadError(WorldportError):
    """Legacy save file could not be decoded."""

    kind = "Level Load Error"


class ConversionError(WorldportError):
    """World could not be mapped into the target model."""

    kind = "Conversion Error"


class WriteError(WorldportError):
    """Browser storage file could not be written."""

    kind = "Write Error"


class InvalidModeError(WorldportError):
    """Configured output mode is not a known delivery mode."""

    kind = "Invalid Mode"

    def __init__(self, value: int) -> None:
        super().__init__(f"Output mode invalid, expected 0 or 1 but found {value}")
        self.value = value


class PluginError(WorldportError):
    """Plugin module could not be imported or resolved."""

    kind = "Plugin Error"


__all__ = [
    "WorldportError",
    "ConfigParseError",
    "FileError",
    "MissingFileError",
    "LevelLoadError",
    "ConversionError",
    "WriteError",
    "InvalidModeError",
    "PluginError",
]
