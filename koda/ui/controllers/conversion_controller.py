"""ConversionController — 입력 선택/메타데이터/프리셋/변환 상태 머신.

상태는 GUI 스레드에서만 변경된다. ffprobe/ffmpeg 실행은 QThread로
옮긴 워커에서 수행하고, 결과는 queued signal로 돌아온다.
각 워커는 자신이 속한 선택의 generation 번호를 가지고 있어
새 파일 선택 이후 도착한 이전 결과는 버린다.
"""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QObject, QThread, Signal, Slot

from koda.infrastructure.process_runner import FFmpegRunner, get_ffmpeg_runner
from koda.models.conversion_preset import ConversionPreset
from koda.models.conversion_session import ConversionSession, ConversionState
from koda.models.media_metadata import MediaMetadata
from koda.services.ffmpeg_logger import format_command_line
from koda.services.output_path import resolve_output_path
from koda.services.preset_matcher import match_presets
from koda.utils.config import FFMPEG_COMMAND
from koda.utils.i18n import tr
from koda.workers.convert_worker import ConvertWorker
from koda.workers.probe_worker import ProbeWorker

logger = logging.getLogger(__name__)

METADATA_LOADED_MESSAGE = "Metadata loaded"
METADATA_ERROR_TEMPLATE = (
    "Error: failed to read metadata. Ensure ffprobe is installed "
    "and accessible in PATH. ({error})"
)
STARTING_MESSAGE = "Starting conversion…"
NO_OUTPUT_NOTICE = "ffmpeg completed without additional output."
FINISHED_TEMPLATE = "Finished: {name}"
CONVERT_ERROR_TEMPLATE = "Error: {error}"
SAVED_TO_TEMPLATE = "Saved to: {path}"


class ConversionController(QObject):
    """Owns the single active ConversionSession and drives its transitions.

    Presentation code reads :attr:`session` (pull) and listens to
    ``state_changed`` / ``session_changed`` (push).

    Signals:
        state_changed(ConversionState): emitted on every state transition.
        session_changed(): emitted whenever any session field changes.
    """

    state_changed = Signal(object)
    session_changed = Signal()

    def __init__(self, runner: FFmpegRunner | None = None, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._runner = runner
        self._generation = 0
        self._session = ConversionSession()
        # 실행 중인 (thread, worker): 참조를 유지해야 GC로 파괴되지 않음
        self._jobs: list[tuple[QThread, QObject]] = []

    # ---- 조회 ----

    @property
    def session(self) -> ConversionSession:
        return self._session

    @property
    def state(self) -> ConversionState:
        return self._session.state

    @property
    def selected_preset(self) -> ConversionPreset | None:
        return self._session.selected_preset

    @property
    def can_convert(self) -> bool:
        return self._session.can_convert

    @property
    def runner(self) -> FFmpegRunner:
        if self._runner is None:
            self._runner = get_ffmpeg_runner()
        return self._runner

    # ---- 명령 ----

    def select_input(self, path: Path | str) -> bool:
        """Start a new selection for *path* and probe it in the background.

        Rejected (returns False) while a conversion is running. A probe still
        in flight for an earlier selection is superseded.
        """
        if self._session.state == ConversionState.CONVERTING:
            logger.info("Ignoring input selection while a conversion is running")
            return False

        self._generation += 1
        input_path = Path(path)
        self._session = ConversionSession(input_path=input_path, generation=self._generation)
        logger.info(f"Selected input {input_path} (generation {self._generation})")
        self._set_state(ConversionState.FETCHING_METADATA)

        worker = ProbeWorker(input_path, self._generation, self.runner)
        worker.finished.connect(self._on_probe_finished)
        worker.error.connect(self._on_probe_error)
        self._start_worker(worker, (worker.finished, worker.error))
        return True

    def select_preset(self, identity: str | None) -> bool:
        """Select one of the offered presets by identity."""
        if identity is not None and all(p.identity != identity for p in self._session.presets):
            logger.debug(f"Unknown or unavailable preset: {identity}")
            return False
        if self._session.state == ConversionState.CONVERTING:
            return False
        self._session.selected_preset_id = identity
        self.session_changed.emit()
        return True

    def convert(self) -> bool:
        """Run ffmpeg for the selected input and preset.

        No-op (returns False) unless an input and preset are selected and
        nothing is running; a second call while converting is rejected.
        """
        session = self._session
        if not session.can_convert:
            logger.debug(f"convert() ignored in state {session.state.value}")
            return False

        preset = session.selected_preset
        if preset is None or session.input_path is None:
            return False

        output_path = resolve_output_path(session.input_path, preset.output_extension)
        arguments = preset.build_arguments(session.input_path, output_path)

        session.output_path = output_path
        session.status_message = tr(STARTING_MESSAGE)
        session.log = f"$ {format_command_line([FFMPEG_COMMAND] + arguments)}"
        logger.info(f"Converting {session.input_path.name} with '{preset.name}' -> {output_path}")
        self._set_state(ConversionState.CONVERTING)

        worker = ConvertWorker(arguments, session.generation, self.runner)
        worker.finished.connect(self._on_convert_finished)
        worker.error.connect(self._on_convert_error)
        self._start_worker(worker, (worker.finished, worker.error))
        return True

    def wait_for_workers(self) -> None:
        """Block until every background thread has exited (app shutdown).

        There is no timeout: a running ffmpeg cannot be interrupted, and a
        QThread destroyed while running aborts the process.
        """
        for thread, _worker in list(self._jobs):
            if thread.isRunning():
                thread.quit()
                thread.wait()
        self._prune_jobs()

    # ---- 워커 결과 (GUI 스레드) ----

    def _is_current(self, generation: int) -> bool:
        if generation != self._session.generation:
            logger.debug(f"Discarding stale result for generation {generation}")
            return False
        return True

    @Slot(int, object, str)
    def _on_probe_finished(self, generation: int, metadata: MediaMetadata, raw_output: str) -> None:
        if not self._is_current(generation):
            return
        session = self._session
        session.metadata = metadata
        session.metadata_raw_output = raw_output
        match = match_presets(metadata)
        session.presets = list(match.presets)
        session.is_fallback = match.is_fallback
        default = match.default_preset
        session.selected_preset_id = default.identity if default else None
        session.status_message = tr(METADATA_LOADED_MESSAGE)
        self._set_state(ConversionState.READY)

    @Slot(int, str)
    def _on_probe_error(self, generation: int, error: str) -> None:
        if not self._is_current(generation):
            return
        session = self._session
        message = tr(METADATA_ERROR_TEMPLATE, error=error)
        session.metadata_error = message
        session.status_message = message
        # 메타데이터 없이도 변환은 가능 → 전체 프리셋 제공
        match = match_presets(None)
        session.presets = list(match.presets)
        session.is_fallback = match.is_fallback
        default = match.default_preset
        session.selected_preset_id = default.identity if default else None
        self._set_state(ConversionState.READY)

    @Slot(int, str)
    def _on_convert_finished(self, generation: int, output: str) -> None:
        if not self._is_current(generation):
            return
        session = self._session
        output_path = session.output_path
        if output_path is None:
            return
        session.status_message = tr(FINISHED_TEMPLATE, name=output_path.name)
        trimmed = output.strip()
        session.log += "\n\n" + (trimmed if trimmed else tr(NO_OUTPUT_NOTICE))
        session.log += "\n\n" + tr(SAVED_TO_TEMPLATE, path=output_path)
        self._set_state(ConversionState.SUCCEEDED)

    @Slot(int, str, str)
    def _on_convert_error(self, generation: int, error: str, log_message: str) -> None:
        if not self._is_current(generation):
            return
        session = self._session
        session.status_message = tr(CONVERT_ERROR_TEMPLATE, error=error)
        session.log += "\n\n" + log_message
        self._set_state(ConversionState.FAILED)

    # ---- 내부 ----

    def _set_state(self, state: ConversionState) -> None:
        self._session.state = state
        logger.debug(f"State -> {state.value}")
        self.state_changed.emit(state)
        self.session_changed.emit()

    def _start_worker(self, worker: QObject, done_signals: tuple) -> None:
        thread = QThread()
        worker.moveToThread(thread)
        thread.started.connect(worker.run)
        for signal in done_signals:
            signal.connect(thread.quit)
        thread.finished.connect(worker.deleteLater)
        self._prune_jobs()
        self._jobs.append((thread, worker))
        thread.start()

    def _prune_jobs(self) -> None:
        # 종료된 스레드만 참조 해제 (GUI 스레드에서만 호출)
        self._jobs = [(t, w) for t, w in self._jobs if not t.isFinished()]
