"""Utility for logging ffmpeg/ffprobe invocations to a file."""

import logging
from pathlib import Path

from koda.utils.config import LOG_DIR_NAME


def get_ffmpeg_log_path() -> Path:
    """Return the path to the FFmpeg log file."""
    log_dir = Path.home() / LOG_DIR_NAME / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "ffmpeg.log"


# Setup a specific logger for FFmpeg
_logger = logging.getLogger("ffmpeg_output")
_logger.setLevel(logging.DEBUG)
_logger.propagate = False


def _ensure_handler() -> None:
    """Attach the file handler on first use."""
    if _logger.handlers:
        return
    try:
        fh = logging.FileHandler(get_ffmpeg_log_path(), encoding="utf-8")
    except OSError:
        # Read-only home: keep running without a log file
        _logger.addHandler(logging.NullHandler())
        return
    fh.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
    _logger.addHandler(fh)


def format_command_line(args: list[str]) -> str:
    """Join *args* for display, double-quoting arguments that contain spaces."""
    return " ".join(f'"{arg}"' if " " in arg else arg for arg in args)


def log_ffmpeg_command(args: list[str]) -> None:
    """Log the command being executed."""
    _ensure_handler()
    _logger.info(f"Executing: {format_command_line(args)}")


def log_ffmpeg_output(text: str) -> None:
    """Log captured process output, one record per line."""
    _ensure_handler()
    for line in text.splitlines():
        _logger.debug(line.rstrip())


def log_ffmpeg_failure(status: int, message: str) -> None:
    _ensure_handler()
    _logger.error(f"Exited with status {status}: {message}")
