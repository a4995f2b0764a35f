"""Application-layer use-cases and result objects."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from worldport.application.delivery import DeliveryWriter
from worldport.application.ports import LevelLoader, ModelSerializer, WorldConverter
from worldport.application.results import PipelineResult
from worldport.config import CONFIG_PATH


def run_pipeline(
    config_path: Path = CONFIG_PATH,
    *,
    loader: LevelLoader | None = None,
    converter: WorldConverter | None = None,
    serializer: ModelSerializer | None = None,
    delivery: DeliveryWriter | None = None,
    progress: Callable[[str], None] | None = None,
) -> PipelineResult:
    """Run the conversion pipeline via lazy use-case import."""
    from worldport.application.use_cases import run_pipeline as _impl

    return _impl(
        config_path,
        loader=loader,
        converter=converter,
        serializer=serializer,
        delivery=delivery,
        progress=progress,
    )


__all__ = ["PipelineResult", "run_pipeline"]
