"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from worldport.types import DeliveryMode


@dataclass(frozen=True)
class PipelineResult:
    """Structured outcome of a completed pipeline run."""

    input_path: Path
    output_path: Path
    mode: DeliveryMode
    plugin: str | None = None
