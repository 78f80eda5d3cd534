"""Application configuration constants."""

from __future__ import annotations

import sys

APP_NAME = "Koda"
ORG_NAME = "Koda"

# FFmpeg
if sys.platform == "darwin":
    FFMPEG_PATH = "/opt/homebrew/bin/ffmpeg"
elif sys.platform == "win32":
    FFMPEG_PATH = r"C:\ffmpeg\bin\ffmpeg.exe"
else:
    FFMPEG_PATH = "/usr/bin/ffmpeg"

FFMPEG_COMMAND = "ffmpeg"
FFPROBE_COMMAND = "ffprobe"

# Log file location (ffmpeg command lines and output)
LOG_DIR_NAME = ".koda"

# Supported video formats
VIDEO_EXTENSIONS = [
    ".mp4", ".m4v", ".mov", ".mkv", ".avi", ".webm", ".flv",
    ".wmv", ".mpg", ".mpeg", ".ts", ".mxf",
]

# UI
WINDOW_MIN_WIDTH = 780
WINDOW_MIN_HEIGHT = 640
RAW_OUTPUT_MAX_HEIGHT = 180
FFMPEG_LOG_MAX_HEIGHT = 200
