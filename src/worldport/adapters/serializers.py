"""Serializers encoding target models into string artifacts."""

from __future__ import annotations

import base64
import gzip

from worldport.adapters.converters import WebWorld
from worldport.errors import ConversionError
from worldport.schemas import WorldMetadata
from worldport.types import SerializedArtifacts


def encode_payload(raw: bytes) -> str:
    """Compress and base64-encode a binary payload."""
    return base64.b64encode(gzip.compress(raw, mtime=0)).decode("ascii")


class WebWorldSerializer:
    """Encode :class:`WebWorld` into payload and metadata strings."""

    def serialize(self, model: object) -> SerializedArtifacts:
        """Return the base64 payload and its JSON metadata document."""
        if not isinstance(model, WebWorld):
            raise ConversionError(
                f"Expected a converted world, got {type(model).__name__}."
            )
        raw = model.blocks + model.data
        major, minor = model.target_version
        metadata = WorldMetadata(
            format=model.source_format,
            name=model.name,
            source_version=model.source_version,
            target_version=f"{major}.{minor}",
            size_bytes=len(raw),
            width=model.width,
            height=model.height,
            depth=model.depth,
        )
        return SerializedArtifacts(
            payload=encode_payload(raw),
            metadata=metadata.model_dump_json(),
        )
