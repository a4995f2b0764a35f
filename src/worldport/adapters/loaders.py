"""Level loaders for legacy save files."""

from __future__ import annotations

import gzip
import struct
import zlib
from dataclasses import dataclass
from pathlib import Path

from worldport.errors import LevelLoadError

CLASSIC_MAGIC = 0x271BB788
PRECLASSIC_DIMENSIONS = (256, 64, 256)
_HEADER = struct.Struct(">IB")
_TIMESTAMP_AND_SIZE = struct.Struct(">qhhh")


@dataclass(frozen=True)
class ClassicWorld:
    """Legacy world with its block array left undecoded.

    ``format_version`` is 0 for headerless pre-classic saves, 1 for the
    plain header format and 2 for Java-serialized levels, whose body is
    kept as-is.
    """

    format_version: int
    body: bytes
    name: str | None = None
    creator: str | None = None
    create_time: int | None = None
    width: int | None = None
    height: int | None = None
    depth: int | None = None


def _read_utf(data: bytes, offset: int) -> tuple[str, int]:
    """Read a length-prefixed ``DataOutputStream.writeUTF`` string."""
    if offset + 2 > len(data):
        raise LevelLoadError("Level header is truncated.")
    (length,) = struct.unpack_from(">H", data, offset)
    start = offset + 2
    end = start + length
    if end > len(data):
        raise LevelLoadError("Level header is truncated.")
    return data[start:end].decode("utf-8", errors="replace"), end


def _parse_v1(body: bytes) -> ClassicWorld:
    name, offset = _read_utf(body, 0)
    creator, offset = _read_utf(body, offset)
    if offset + _TIMESTAMP_AND_SIZE.size > len(body):
        raise LevelLoadError("Level header is truncated.")
    create_time, width, height, depth = _TIMESTAMP_AND_SIZE.unpack_from(body, offset)
    if width <= 0 or height <= 0 or depth <= 0:
        raise LevelLoadError(
            f"Level dimensions must be positive, found {width}x{height}x{depth}."
        )
    return ClassicWorld(
        format_version=1,
        body=body[offset + _TIMESTAMP_AND_SIZE.size :],
        name=name,
        creator=creator,
        create_time=create_time,
        width=width,
        height=height,
        depth=depth,
    )


def parse_level_bytes(data: bytes) -> ClassicWorld:
    """Decode the decompressed contents of a legacy save.

    Parameters
    ----------
    data : bytes
        Decompressed ``level.dat`` contents.

    Returns
    -------
    ClassicWorld
        World with header fields filled where the format carries them.

    Raises
    ------
    LevelLoadError
        If the contents match no known legacy format.
    """
    if len(data) >= _HEADER.size:
        magic, version = _HEADER.unpack_from(data, 0)
        if magic == CLASSIC_MAGIC:
            body = data[_HEADER.size :]
            if version == 1:
                return _parse_v1(body)
            if version == 2:
                return ClassicWorld(format_version=2, body=body)
            raise LevelLoadError(f"Unknown classic level version {version}.")

    width, height, depth = PRECLASSIC_DIMENSIONS
    if len(data) == width * height * depth:
        return ClassicWorld(
            format_version=0,
            body=data,
            width=width,
            height=height,
            depth=depth,
        )
    raise LevelLoadError("File is not a recognised classic level.")


class ClassicLevelLoader:
    """Load gzip-compressed classic ``level.dat`` files."""

    def load(self, level_path: Path) -> ClassicWorld:
        """Read and unwrap a classic save.

        Parameters
        ----------
        level_path : Path
            Path to the ``level.dat`` file.

        Returns
        -------
        ClassicWorld
            Decoded world container.
        """
        try:
            with gzip.open(level_path, "rb") as handle:
                data = handle.read()
        except (OSError, EOFError, zlib.error) as exc:
            raise LevelLoadError(f"Could not read {level_path}: {exc}") from exc
        return parse_level_bytes(data)
