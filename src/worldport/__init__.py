"""Top-level API for converting legacy voxel saves for the browser client."""

from __future__ import annotations

from pathlib import Path

from worldport.application.results import PipelineResult
from worldport.config import CONFIG_PATH
from worldport.types import DeliveryMode, SerializedArtifacts

__version__ = "0.1.0"


def convert_level(config_path: Path = CONFIG_PATH) -> PipelineResult:
    """Run the whole pipeline for the configuration at ``config_path``.

    Parameters
    ----------
    config_path : Path
        Configuration file; written with defaults when absent.

    Returns
    -------
    PipelineResult
        Input path, delivery mode and written output of the run.
    """
    from .application.use_cases import run_pipeline as _impl

    return _impl(config_path)


__all__ = [
    "DeliveryMode",
    "PipelineResult",
    "SerializedArtifacts",
    "convert_level",
]
