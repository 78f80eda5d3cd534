"""
Bundled FFmpeg using imageio-ffmpeg.
Automatically downloads FFmpeg binaries if not found.
"""
from __future__ import annotations

import shutil
import sys
from pathlib import Path


def get_bundled_ffmpeg() -> str:
    """
    Get FFmpeg executable path.
    Uses imageio-ffmpeg to auto-download if not found.

    Returns:
        Path to ffmpeg executable

    Raises:
        ImportError: If imageio-ffmpeg is not installed
        RuntimeError: If FFmpeg cannot be obtained
    """
    try:
        import imageio_ffmpeg
    except ImportError:
        raise ImportError(
            "imageio-ffmpeg is not installed.\n"
            "Install with: pip install imageio-ffmpeg"
        )
    try:
        return imageio_ffmpeg.get_ffmpeg_exe()
    except Exception as e:
        raise RuntimeError(f"Failed to get bundled FFmpeg: {e}")


def get_bundled_ffprobe() -> str | None:
    """
    Get FFprobe executable path.
    Tries to find it alongside bundled FFmpeg.

    imageio-ffmpeg only ships ffmpeg, so this usually falls back
    to the system ffprobe.

    Returns:
        Path to ffprobe or None if not found
    """
    try:
        ffmpeg_path = get_bundled_ffmpeg()
    except (ImportError, RuntimeError):
        return None

    ffmpeg_dir = Path(ffmpeg_path).parent
    ffprobe_path = ffmpeg_dir / ("ffprobe.exe" if sys.platform == "win32" else "ffprobe")
    if ffprobe_path.exists():
        return str(ffprobe_path)

    return shutil.which("ffprobe")
