"""Browser storage file writer.

The layout follows the per-origin local-storage databases browsers keep on
disk: one directory per origin (``https://example.test`` becomes
``https+++example.test``) holding ``ls/data.sqlite`` with a ``database``
table recording the origin and a ``data`` table of key/value rows.
"""

from __future__ import annotations

import logging
import re
import sqlite3
from collections.abc import Iterable
from contextlib import closing
from pathlib import Path

from worldport.errors import FileError, WriteError
from worldport.types import SerializedArtifacts

logger = logging.getLogger(__name__)

PAYLOAD_KEY = "worldport.level"
METADATA_KEY = "worldport.level_meta"
STORAGE_FILENAME = "data.sqlite"

_ORIGIN_UNSAFE = re.compile(r"[:/\\?*<>|\"]")

_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS database (
        origin TEXT NOT NULL,
        usage INTEGER NOT NULL DEFAULT 0,
        last_vacuum_time INTEGER NOT NULL DEFAULT 0,
        last_analyze_time INTEGER NOT NULL DEFAULT 0,
        last_vacuum_size INTEGER NOT NULL DEFAULT 0
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS data (
        key TEXT PRIMARY KEY,
        utf16_length INTEGER NOT NULL,
        conversion_type INTEGER NOT NULL,
        compression_type INTEGER NOT NULL,
        last_access_time INTEGER NOT NULL DEFAULT 0,
        value BLOB NOT NULL
    )
    """,
)


def storage_items(artifacts: SerializedArtifacts) -> list[tuple[str, str]]:
    """Return the ``(key, value)`` pairs written for a set of artifacts."""
    return [(PAYLOAD_KEY, artifacts.payload), (METADATA_KEY, artifacts.metadata)]


def origin_directory_name(origin: str) -> str:
    """Return the directory name a browser uses for ``origin``."""
    cleaned = origin.strip().rstrip("/")
    if not cleaned:
        raise WriteError("Output website cannot be empty.")
    return _ORIGIN_UNSAFE.sub("+", cleaned)


def storage_file_path(folder: Path, origin: str) -> Path:
    """Return where the storage file for ``origin`` lives under ``folder``."""
    return folder / origin_directory_name(origin) / "ls" / STORAGE_FILENAME


def _utf16_length(value: str) -> int:
    return len(value.encode("utf-16-le")) // 2


def _write_rows(
    conn: sqlite3.Connection, origin: str, items: Iterable[tuple[str, str]]
) -> None:
    for statement in _SCHEMA:
        conn.execute(statement)
    conn.executemany(
        "INSERT OR REPLACE INTO data "
        "(key, utf16_length, conversion_type, compression_type, value) "
        "VALUES (?, ?, 1, 0, ?)",
        [(key, _utf16_length(value), value.encode("utf-8")) for key, value in items],
    )
    (usage,) = conn.execute(
        "SELECT COALESCE(SUM(LENGTH(key) + utf16_length), 0) FROM data"
    ).fetchone()
    conn.execute("DELETE FROM database")
    conn.execute(
        "INSERT INTO database (origin, usage) VALUES (?, ?)", (origin, usage)
    )


class SqliteStorageWriter:
    """Persist artifacts into a per-origin SQLite storage file."""

    def write(
        self,
        folder: Path,
        artifacts: SerializedArtifacts,
        origin: str,
    ) -> Path:
        """Write both artifacts in one transaction.

        Parameters
        ----------
        folder : Path
            Output folder receiving the origin directory.
        artifacts : SerializedArtifacts
            Payload and metadata strings.
        origin : str
            Website origin that partitions the storage.

        Returns
        -------
        Path
            Path of the written storage file.
        """
        path = storage_file_path(folder, origin)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FileError.from_cause(exc) from exc

        try:
            with closing(sqlite3.connect(path)) as conn, conn:
                _write_rows(conn, origin.strip().rstrip("/"), storage_items(artifacts))
        except sqlite3.Error as exc:
            raise WriteError.from_cause(exc) from exc
        logger.info("wrote storage file %s for %s", path, origin)
        return path
