"""Configuration bootstrap: create the default file or load the existing one."""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from worldport.errors import ConfigParseError, FileError
from worldport.schemas import Configuration

logger = logging.getLogger(__name__)

CONFIG_PATH = Path("config.toml")

INPUT_FOLDER = "input"
INPUT_FILE = "level.dat"
OUTPUT_MODE = 0
OUTPUT_FOLDER = "output"
OUTPUT_FILE = "level.mclevel"
OUTPUT_WEBSITE = "http://localhost:8080"

DEFAULT_CONFIG = f"""\
[input-settings]
input-folder = "{INPUT_FOLDER}"
input-file = "{INPUT_FILE}"

[output-settings]
# 0 writes a browser storage file, 1 writes a console injection script.
output-mode = {OUTPUT_MODE}
output-folder = "{OUTPUT_FOLDER}"
output-file = "{OUTPUT_FILE}"
output-website = "{OUTPUT_WEBSITE}"
"""


def normalize_keys(value: Any) -> Any:
    """Return ``value`` with ``-`` replaced by ``_`` in every table key.

    Raises
    ------
    ConfigParseError
        If two spellings of the same key appear in one table.
    """
    if isinstance(value, Mapping):
        normalized: dict[str, Any] = {}
        for key, item in value.items():
            new_key = key.replace("-", "_")
            if new_key in normalized:
                raise ConfigParseError(f"Duplicate configuration key '{new_key}'.")
            normalized[new_key] = normalize_keys(item)
        return normalized
    if isinstance(value, list):
        return [normalize_keys(item) for item in value]
    return value


def parse_config(text: str) -> Configuration:
    """Parse configuration text into a validated :class:`Configuration`.

    Parameters
    ----------
    text : str
        TOML document using either ``input-folder`` or ``input_folder``
        style keys.

    Returns
    -------
    Configuration
        Immutable configuration for this run.

    Raises
    ------
    ConfigParseError
        If the text is not valid TOML or does not match the schema.
    """
    try:
        raw = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigParseError.from_cause(exc) from exc
    try:
        return Configuration.model_validate(normalize_keys(raw))
    except ValidationError as exc:
        raise ConfigParseError.from_cause(exc) from exc


def write_default_config(path: Path) -> bool:
    """Create ``path`` with the default configuration.

    Returns ``False`` without touching the file when it already exists.
    """
    try:
        with path.open("x", encoding="utf-8") as handle:
            handle.write(DEFAULT_CONFIG)
    except FileExistsError:
        return False
    except OSError as exc:
        raise FileError.from_cause(exc) from exc
    logger.info("wrote default configuration to %s", path)
    return True


def ensure_and_load(path: Path = CONFIG_PATH) -> Configuration:
    """Load the configuration, writing the defaults first when it is absent."""
    if not path.exists():
        write_default_config(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise FileError.from_cause(exc) from exc
    config = parse_config(text)
    logger.debug("loaded configuration from %s: %s", path, config)
    return config
