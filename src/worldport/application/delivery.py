"""Delivery of serialized artifacts to the browser client."""

from __future__ import annotations

import logging
from pathlib import Path

from worldport.application.ports import ScriptWriter, StorageWriter
from worldport.errors import FileError, WorldportError, WriteError
from worldport.infrastructure.script import ConsoleScriptWriter
from worldport.infrastructure.storage import SqliteStorageWriter
from worldport.schemas import OutputSettings
from worldport.types import DeliveryMode, SerializedArtifacts

logger = logging.getLogger(__name__)


class DeliveryWriter:
    """Write artifacts with exactly one delivery mode per call."""

    def __init__(
        self,
        storage_writer: StorageWriter | None = None,
        script_writer: ScriptWriter | None = None,
    ) -> None:
        self.storage_writer = storage_writer or SqliteStorageWriter()
        self.script_writer = script_writer or ConsoleScriptWriter()

    def deliver(
        self,
        mode: DeliveryMode | int,
        artifacts: SerializedArtifacts,
        settings: OutputSettings,
    ) -> Path:
        """Persist ``artifacts`` according to ``mode``.

        Parameters
        ----------
        mode : DeliveryMode | int
            Decoded mode, or a raw ``output_mode`` value.
        artifacts : SerializedArtifacts
            Payload and metadata strings.
        settings : OutputSettings
            Output folder, file and website.

        Returns
        -------
        Path
            Storage file (direct mode) or script file (script mode).

        Raises
        ------
        InvalidModeError
            If ``mode`` is not a known delivery mode; nothing is written.
        WriteError
            If the storage file cannot be written.
        FileError
            If the script file cannot be written.
        """
        mode = DeliveryMode.decode(int(mode))
        folder = Path(settings.output_folder)
        logger.info("delivering artifacts in %s mode", mode.name.lower())

        if mode is DeliveryMode.DIRECT:
            try:
                return self.storage_writer.write(
                    folder, artifacts, settings.output_website
                )
            except WorldportError:
                raise
            except Exception as exc:
                raise WriteError.from_cause(exc) from exc

        try:
            return self.script_writer.write(folder / settings.output_file, artifacts)
        except WorldportError:
            raise
        except Exception as exc:
            raise FileError.from_cause(exc) from exc
