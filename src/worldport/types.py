"""Shared type aliases and protocols for pipeline stages."""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple, Protocol, TypeAlias

from worldport.errors import InvalidModeError


class WorldObject(Protocol):
    """Marker protocol for decoded legacy worlds."""


class TargetModel(Protocol):
    """Marker protocol for worlds in the browser client's data model."""


class SerializedArtifacts(NamedTuple):
    """Data payload and its companion metadata, always delivered together."""

    payload: str
    metadata: str


class DeliveryMode(IntEnum):
    """How serialized artifacts reach the browser client."""

    DIRECT = 0
    SCRIPT = 1

    @classmethod
    def decode(cls, value: int) -> DeliveryMode:
        """Map a configured ``output_mode`` value onto a delivery mode.

        Raises
        ------
        InvalidModeError
            If ``value`` is not a known mode.
        """
        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidModeError(value) from exc


TargetVersion: TypeAlias = tuple[int, int]
