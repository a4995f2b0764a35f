"""Application ports for the external pipeline collaborators."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from worldport.types import SerializedArtifacts, TargetModel, WorldObject


class LevelLoader(Protocol):
    """Decode a legacy save file into an in-memory world."""

    def load(self, level_path: Path) -> WorldObject:
        """Load world from path."""


class WorldConverter(Protocol):
    """Map a legacy world into the browser client's data model."""

    def convert(
        self,
        world: WorldObject,
        target_major: int,
        target_minor: int,
    ) -> TargetModel:
        """Convert world for the given target version."""


class ModelSerializer(Protocol):
    """Encode a target model into its two string artifacts."""

    def serialize(self, model: TargetModel) -> SerializedArtifacts:
        """Return ``(payload, metadata)``."""


class StorageWriter(Protocol):
    """Persist artifacts into a browser-compatible storage file."""

    def write(
        self,
        folder: Path,
        artifacts: SerializedArtifacts,
        origin: str,
    ) -> Path:
        """Write artifacts under ``origin`` and return the storage file path."""


class ScriptWriter(Protocol):
    """Emit a console script injecting artifacts into browser storage."""

    def write(self, path: Path, artifacts: SerializedArtifacts) -> Path:
        """Write the script to ``path`` and return it."""
