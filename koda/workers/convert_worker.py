"""Background worker for running an ffmpeg conversion."""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

from koda.infrastructure.process_runner import FFmpegRunner, ProcessError

logger = logging.getLogger(__name__)


class ConvertWorker(QObject):
    """Runs one ffmpeg invocation in a background thread.

    Signals:
        finished(int, str): (generation, ffmpeg output)
        error(int, str, str): (generation, error description, log message)
    """

    finished = Signal(int, str)
    error = Signal(int, str, str)

    def __init__(self, arguments: list[str], generation: int, runner: FFmpegRunner):
        super().__init__()
        self._arguments = list(arguments)
        self._generation = generation
        self._runner = runner

    def run(self) -> None:
        try:
            output = self._runner.transcode(self._arguments)
        except ProcessError as e:
            logger.warning(f"ffmpeg failed: {e}")
            self.error.emit(self._generation, str(e), e.display_message)
            return
        except Exception as e:
            logger.exception(f"Error in ConvertWorker: {e}")
            self.error.emit(self._generation, str(e), str(e))
            return
        self.finished.emit(self._generation, output)
