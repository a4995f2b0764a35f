"""Built-in format plugins."""

from __future__ import annotations

from pathlib import Path

from worldport.adapters.converters import ClassicWorldConverter, WebWorld
from worldport.adapters.loaders import ClassicLevelLoader, ClassicWorld
from worldport.adapters.serializers import WebWorldSerializer
from worldport.types import SerializedArtifacts


class ClassicLevelPlugin:
    """Classic and pre-classic ``level.dat`` saves."""

    name = "classic"
    suffixes = frozenset({".dat", ".mine"})

    def __init__(self) -> None:
        self._loader = ClassicLevelLoader()
        self._converter = ClassicWorldConverter()
        self._serializer = WebWorldSerializer()

    def can_handle(self, level_path: Path) -> bool:
        """Claim files by extension; content is checked when loading."""
        return level_path.suffix.lower() in self.suffixes

    def load(self, level_path: Path) -> ClassicWorld:
        """Load a classic save."""
        return self._loader.load(level_path)

    def convert(
        self,
        world: object,
        target_major: int,
        target_minor: int,
    ) -> WebWorld:
        """Convert a classic world."""
        return self._converter.convert(world, target_major, target_minor)

    def serialize(self, model: object) -> SerializedArtifacts:
        """Serialize a converted world."""
        return self._serializer.serialize(model)
