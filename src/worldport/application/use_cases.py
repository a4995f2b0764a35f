"""Application use-case driving the conversion pipeline."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TypeAlias

from worldport.application.delivery import DeliveryWriter
from worldport.application.ports import LevelLoader, ModelSerializer, WorldConverter
from worldport.application.results import PipelineResult
from worldport.config import CONFIG_PATH, ensure_and_load
from worldport.environment import ensure_dir, resolve_input
from worldport.errors import (
    ConversionError,
    LevelLoadError,
    PluginError,
    WorldportError,
)
from worldport.plugins.registry import create_default_registry
from worldport.types import DeliveryMode

logger = logging.getLogger(__name__)

TARGET_MAJOR = 1
TARGET_MINOR = 8

ProgressCallback: TypeAlias = Callable[[str], None]


@contextmanager
def _stage(
    label: str,
    error_type: type[WorldportError],
    progress: ProgressCallback | None,
) -> Iterator[None]:
    """Run one stage, converting foreign exceptions into ``error_type``."""
    logger.info("stage: %s", label)
    if progress is not None:
        progress(label)
    try:
        yield
    except WorldportError:
        raise
    except Exception as exc:
        raise error_type.from_cause(exc) from exc


def run_pipeline(
    config_path: Path = CONFIG_PATH,
    *,
    loader: LevelLoader | None = None,
    converter: WorldConverter | None = None,
    serializer: ModelSerializer | None = None,
    delivery: DeliveryWriter | None = None,
    progress: ProgressCallback | None = None,
) -> PipelineResult:
    """Use-case: convert the configured legacy save and deliver it.

    Parameters
    ----------
    config_path : Path
        Configuration file; created with defaults when absent.
    loader, converter, serializer : optional
        Collaborators overriding the ones supplied by the resolved plugin.
    delivery : DeliveryWriter | None
        Delivery writer; defaults to the SQLite/script writers.
    progress : Callable[[str], None] | None
        Receives a short label as each stage starts.

    Returns
    -------
    PipelineResult
        Paths and mode of the completed run.

    Raises
    ------
    WorldportError
        The first stage failure; no later stage runs.
    """
    config = ensure_and_load(config_path)
    mode = DeliveryMode.decode(config.output_settings.output_mode)

    ensure_dir(config.input_settings.input_folder)
    ensure_dir(config.output_settings.output_folder)
    level_path = resolve_input(
        config.input_settings.input_folder, config.input_settings.input_file
    )

    plugin_name: str | None = None
    if loader is None or converter is None or serializer is None:
        with _stage("Resolving plugin", PluginError, None):
            plugin = create_default_registry(
                config.plugin_settings.plugin_modules
            ).resolve(level_path, config.plugin_settings.plugin_name)
        plugin_name = plugin.name
        logger.info("using plugin %s for %s", plugin.name, level_path)
        loader = loader or plugin
        converter = converter or plugin
        serializer = serializer or plugin

    with _stage("Loading level", LevelLoadError, progress):
        world = loader.load(level_path)

    with _stage("Converting level", ConversionError, progress):
        model = converter.convert(world, TARGET_MAJOR, TARGET_MINOR)
    del world

    with _stage("Serializing level", ConversionError, progress):
        artifacts = serializer.serialize(model)
    del model

    if progress is not None:
        progress("Writing level")
    output_path = (delivery or DeliveryWriter()).deliver(
        mode, artifacts, config.output_settings
    )
    logger.info("pipeline finished: %s", output_path)
    return PipelineResult(
        input_path=level_path,
        output_path=output_path,
        mode=mode,
        plugin=plugin_name,
    )
