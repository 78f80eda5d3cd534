"""FFmpeg utilities for finding ffmpeg and ffprobe executables."""

from __future__ import annotations

import shutil
import sys
from pathlib import Path

from koda.services.settings_manager import SettingsManager


def _configured_path(key: str) -> str | None:
    """Return the user-configured tool path from QSettings, if any."""
    settings = SettingsManager()
    if key == "ffprobe":
        return settings.get_ffprobe_path()
    return settings.get_ffmpeg_path()


def find_ffmpeg() -> str | None:
    """
    Find ffmpeg executable.

    Search order:
    1. User-configured path (QSettings advanced/ffmpeg_path)
    2. System PATH (ffmpeg command)
    3. Platform default path (config.FFMPEG_PATH)
    4. Bundled FFmpeg (imageio-ffmpeg) - auto-download if needed

    Returns:
        Path to ffmpeg or None if not found
    """
    # 1. Try user-configured path
    configured = _configured_path("ffmpeg")
    if configured and Path(configured).is_file():
        return configured

    # 2. Try system PATH
    from .config import FFMPEG_COMMAND, FFMPEG_PATH
    system_ffmpeg = shutil.which(FFMPEG_COMMAND)
    if system_ffmpeg:
        return system_ffmpeg

    # 3. Try platform default
    if Path(FFMPEG_PATH).is_file():
        return FFMPEG_PATH

    # 4. Try bundled FFmpeg (auto-download)
    try:
        from .ffmpeg_bundled import get_bundled_ffmpeg
        return get_bundled_ffmpeg()
    except (ImportError, RuntimeError):
        pass

    return None


def find_ffprobe() -> str | None:
    """
    Find ffprobe executable (usually alongside ffmpeg).

    Returns:
        Path to ffprobe or None if not found
    """
    configured = _configured_path("ffprobe")
    if configured and Path(configured).is_file():
        return configured

    # Try ffprobe directly in PATH
    from .config import FFPROBE_COMMAND
    ffprobe = shutil.which(FFPROBE_COMMAND)
    if ffprobe:
        return ffprobe

    # Try to find it alongside ffmpeg
    ffmpeg_path = find_ffmpeg()
    if ffmpeg_path:
        ffmpeg_dir = Path(ffmpeg_path).parent
        ffprobe_path = ffmpeg_dir / ("ffprobe.exe" if sys.platform == "win32" else "ffprobe")
        if ffprobe_path.is_file():
            return str(ffprobe_path)

    # Try bundled version
    from .ffmpeg_bundled import get_bundled_ffprobe
    return get_bundled_ffprobe()
