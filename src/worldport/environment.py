"""Filesystem preparation and input resolution."""

from __future__ import annotations

import logging
from pathlib import Path

from worldport.errors import FileError, MissingFileError

logger = logging.getLogger(__name__)


def ensure_dir(path: Path | str) -> None:
    """Create ``path`` as a directory unless it already exists.

    Raises
    ------
    FileError
        If the directory cannot be created, or the path is an existing file.
    """
    directory = Path(path)
    if directory.is_dir():
        return
    try:
        directory.mkdir()
    except OSError as exc:
        raise FileError.from_cause(exc) from exc
    logger.info("created directory %s", directory)


def resolve_input(folder: Path | str, file: str) -> Path:
    """Return ``folder/file`` after checking that exact path exists."""
    path = Path(folder) / file
    if not path.is_file():
        raise MissingFileError(path)
    return path
