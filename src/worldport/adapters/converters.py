"""World converters implementing the conversion port."""

from __future__ import annotations

from dataclasses import dataclass

from worldport.adapters.loaders import ClassicWorld
from worldport.errors import ConversionError
from worldport.types import TargetVersion

SUPPORTED_TARGETS: frozenset[TargetVersion] = frozenset({(1, 8)})

CLASSIC_BLOCK_COUNT = 50
WOOL_ID = 35

# Classic cloth colours 21..36 collapse into wool with a colour data value.
CLOTH_TO_WOOL_DATA = {
    21: 14,
    22: 1,
    23: 4,
    24: 5,
    25: 13,
    26: 9,
    27: 3,
    28: 3,
    29: 11,
    30: 10,
    31: 10,
    32: 2,
    33: 6,
    34: 7,
    35: 8,
    36: 0,
}


def _build_tables() -> tuple[bytes, bytes]:
    ids = bytearray(range(256))
    data = bytearray(256)
    for cloth, colour in CLOTH_TO_WOOL_DATA.items():
        ids[cloth] = WOOL_ID
        data[cloth] = colour
    return bytes(ids), bytes(data)


BLOCK_ID_TABLE, BLOCK_DATA_TABLE = _build_tables()
_CLASSIC_IDS = bytes(range(CLASSIC_BLOCK_COUNT))


@dataclass(frozen=True)
class WebWorld:
    """World in the browser client's block model.

    ``blocks`` and ``data`` are parallel arrays in the source's
    ``(y * depth + z) * width + x`` order.
    """

    target_version: TargetVersion
    source_format: str
    source_version: int
    width: int
    height: int
    depth: int
    blocks: bytes
    data: bytes
    name: str | None = None


class ClassicWorldConverter:
    """Convert classic worlds into the release block model."""

    def convert(
        self,
        world: object,
        target_major: int,
        target_minor: int,
    ) -> WebWorld:
        """Remap classic block ids for the requested target version.

        Parameters
        ----------
        world : ClassicWorld
            World returned by :class:`ClassicLevelLoader`.
        target_major, target_minor : int
            Target client version.

        Returns
        -------
        WebWorld
            Converted world.
        """
        if not isinstance(world, ClassicWorld):
            raise ConversionError(
                f"Expected a classic world, got {type(world).__name__}."
            )
        if (target_major, target_minor) not in SUPPORTED_TARGETS:
            raise ConversionError(
                f"Unsupported target version {target_major}.{target_minor}."
            )
        if world.format_version == 2:
            raise ConversionError(
                "Java-serialized classic levels (format 2) are not supported "
                "by the built-in converter."
            )
        if world.width is None or world.height is None or world.depth is None:
            raise ConversionError("Level is missing its dimensions.")

        expected = world.width * world.height * world.depth
        if len(world.body) != expected:
            raise ConversionError(
                f"Level block array has {len(world.body)} bytes, expected {expected}."
            )
        unknown = world.body.translate(None, _CLASSIC_IDS)
        if unknown:
            raise ConversionError(f"Unsupported block id {unknown[0]}.")

        return WebWorld(
            target_version=(target_major, target_minor),
            source_format="classic",
            source_version=world.format_version,
            width=world.width,
            height=world.height,
            depth=world.depth,
            blocks=world.body.translate(BLOCK_ID_TABLE),
            data=world.body.translate(BLOCK_DATA_TABLE),
            name=world.name,
        )
