"""외부 프로세스 실행 추상화. ffprobe/ffmpeg 호출은 모두 이 모듈을 통해 수행.

Application 계층이 subprocess에 직접 의존하지 않도록 하여,
테스트 시 Mock으로 교체할 수 있게 함. 실행은 동기식이며
호출자(워커 스레드)가 GUI 스레드 밖에서 호출한다.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

from koda.services.ffmpeg_logger import (
    log_ffmpeg_command,
    log_ffmpeg_failure,
    log_ffmpeg_output,
)
from koda.utils.config import FFMPEG_COMMAND, FFPROBE_COMMAND
from koda.utils.ffmpeg_utils import find_ffmpeg, find_ffprobe
from koda.utils.i18n import tr

# Exit status reported when the command cannot be launched at all
# (same value a shell uses for "command not found").
LAUNCH_FAILURE_STATUS = 127


class ProcessError(Exception):
    """A child process exited with a non-zero status or could not be launched."""

    UNKNOWN_ERROR_MESSAGE = "Process exited with an unknown error."

    def __init__(self, status: int, message: str = ""):
        self.status = status
        self.message = message
        super().__init__(f"Process exited with status {status}: {message}")

    @property
    def display_message(self) -> str:
        """Message suitable for the user-visible log."""
        return self.message or tr(self.UNKNOWN_ERROR_MESSAGE)


def merge_output(stderr: str, stdout: str) -> str:
    """Concatenate stderr followed by stdout.

    A newline is inserted between them only when both are non-empty
    and stderr does not already end with one.
    """
    needs_join = bool(stderr) and bool(stdout)
    separator = "\n" if needs_join and not stderr.endswith("\n") else ""
    return stderr + separator + stdout


class ProcessRunner:
    """Runs one external command per call and classifies it by exit status."""

    def run(
        self,
        command: str,
        arguments: list[str],
        *,
        collect_stdout: bool = False,
    ) -> str:
        """Run *command* with *arguments* and wait for it to exit.

        Returns the merged stderr+stdout text, or stdout only when
        *collect_stdout* is set. Raises :class:`ProcessError` on a non-zero
        exit status or when the command cannot be started.
        """
        cmd = [command] + list(arguments)
        log_ffmpeg_command(cmd)

        run_kwargs: dict = dict(
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
        if sys.platform == "win32":
            run_kwargs["creationflags"] = subprocess.CREATE_NO_WINDOW  # type: ignore[attr-defined]

        try:
            result = subprocess.run(cmd, check=False, **run_kwargs)
        except OSError as e:
            message = e.strerror or str(e)
            log_ffmpeg_failure(LAUNCH_FAILURE_STATUS, message)
            raise ProcessError(LAUNCH_FAILURE_STATUS, message) from e

        stdout = result.stdout or ""
        stderr = result.stderr or ""

        if result.returncode != 0:
            raw = stderr if stderr else stdout
            message = raw.strip()
            log_ffmpeg_failure(result.returncode, message)
            raise ProcessError(result.returncode, message)

        if collect_stdout:
            log_ffmpeg_output(stdout)
            return stdout

        combined = merge_output(stderr, stdout)
        log_ffmpeg_output(combined)
        return combined


class FFmpegRunner(ProcessRunner):
    """ProcessRunner bound to the ffprobe and ffmpeg executables."""

    def __init__(self, ffmpeg_path: str | None = None, ffprobe_path: str | None = None):
        """경로를 지정하지 않으면 자동 탐색 (settings → PATH → config → bundled)."""
        self._ffmpeg = ffmpeg_path or find_ffmpeg()
        self._ffprobe = ffprobe_path or find_ffprobe()

    def probe(self, input_path: Path | str) -> str:
        """Run ``ffprobe -hide_banner <input>`` and return its merged output."""
        # 탐색 실패 시 명령 이름 그대로 실행 → 실행 실패가 ProcessError로 전달됨
        command = self._ffprobe or FFPROBE_COMMAND
        return self.run(command, ["-hide_banner", str(input_path)])

    def transcode(self, arguments: list[str]) -> str:
        """Run ffmpeg with *arguments* (binary path excluded)."""
        command = self._ffmpeg or FFMPEG_COMMAND
        return self.run(command, arguments)


# 싱글톤 인스턴스 (워커들이 공유)
_default_runner: FFmpegRunner | None = None


def get_ffmpeg_runner() -> FFmpegRunner:
    """기본 FFmpegRunner 인스턴스 반환."""
    global _default_runner
    if _default_runner is None:
        _default_runner = FFmpegRunner()
    return _default_runner
