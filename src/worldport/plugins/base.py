"""Plugin protocol for legacy save formats."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from worldport.types import SerializedArtifacts, TargetModel, WorldObject


@runtime_checkable
class FormatPlugin(Protocol):
    """Protocol implemented by format plugins.

    A plugin bundles the three collaborators a pipeline run needs for one
    legacy format: a loader, a converter and a serializer.
    """

    name: str

    def can_handle(self, level_path: Path) -> bool:
        """Check whether plugin can read the given save file.

        Parameters
        ----------
        level_path : Path
            Path to the legacy save.

        Returns
        -------
        bool
            ``True`` if plugin can convert this file.
        """

    def load(self, level_path: Path) -> WorldObject:
        """Decode the save file."""

    def convert(
        self,
        world: WorldObject,
        target_major: int,
        target_minor: int,
    ) -> TargetModel:
        """Map the world into the target model."""

    def serialize(self, model: TargetModel) -> SerializedArtifacts:
        """Encode the target model into ``(payload, metadata)``."""
