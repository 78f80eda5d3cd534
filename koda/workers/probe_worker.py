"""Background worker for reading media metadata with ffprobe."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QObject, Signal

from koda.infrastructure.process_runner import FFmpegRunner, ProcessError
from koda.services.media_probe import probe_media

logger = logging.getLogger(__name__)


class ProbeWorker(QObject):
    """Runs ffprobe and parses its report in a background thread.

    Signals:
        finished(int, MediaMetadata, str): (generation, metadata, raw_output)
        error(int, str): (generation, error description)
    """

    finished = Signal(int, object, str)
    error = Signal(int, str)

    def __init__(self, input_path: Path, generation: int, runner: FFmpegRunner):
        super().__init__()
        self._input_path = input_path
        self._generation = generation
        self._runner = runner

    def run(self) -> None:
        try:
            result = probe_media(self._input_path, runner=self._runner)
        except ProcessError as e:
            logger.warning(f"ffprobe failed for {self._input_path}: {e}")
            self.error.emit(self._generation, str(e))
            return
        except Exception as e:
            logger.exception(f"Error in ProbeWorker: {e}")
            self.error.emit(self._generation, str(e))
            return
        self.finished.emit(self._generation, result.metadata, result.raw_output)
