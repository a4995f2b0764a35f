"""Console injection script writer."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from worldport.errors import FileError
from worldport.infrastructure.storage import storage_items
from worldport.types import SerializedArtifacts

logger = logging.getLogger(__name__)

SCRIPT_HEADER = (
    "// Generated by worldport.\n"
    "// Paste into the browser console on the game page, then reload it.\n"
)


def render_script(artifacts: SerializedArtifacts) -> str:
    """Return JavaScript storing both artifacts in ``localStorage``."""
    lines = [SCRIPT_HEADER.rstrip("\n"), "(() => {"]
    for key, value in storage_items(artifacts):
        lines.append(
            f"  localStorage.setItem({json.dumps(key)}, {json.dumps(value)});"
        )
    lines.append('  console.log("worldport: level imported, reload to play.");')
    lines.append("})();")
    return "\n".join(lines) + "\n"


class ConsoleScriptWriter:
    """Write the injection script to a file."""

    def write(self, path: Path, artifacts: SerializedArtifacts) -> Path:
        """Render and write the script, returning ``path``."""
        try:
            path.write_text(render_script(artifacts), encoding="utf-8")
        except OSError as exc:
            raise FileError.from_cause(exc) from exc
        logger.info("wrote injection script %s", path)
        return path
