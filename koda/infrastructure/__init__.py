"""Infrastructure layer: external dependencies (ffprobe, ffmpeg).

이 계층은 외부 도구를 추상화하여 Application 계층이
subprocess에 직접 의존하지 않도록 합니다.
"""

from koda.infrastructure.process_runner import (
    FFmpegRunner,
    ProcessError,
    ProcessRunner,
    get_ffmpeg_runner,
)

__all__ = [
    "FFmpegRunner",
    "ProcessError",
    "ProcessRunner",
    "get_ffmpeg_runner",
]
