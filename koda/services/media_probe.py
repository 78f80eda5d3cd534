"""Probe media metadata using ffprobe's human-readable report."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from koda.infrastructure.process_runner import FFmpegRunner, get_ffmpeg_runner
from koda.models.media_metadata import UNKNOWN, MediaMetadata

_INPUT_PREFIX = "Input #0,"
_FROM_MARKER = ", from"
_DURATION_LABEL = "Duration:"
_VIDEO_LABEL = "Video:"
_AUDIO_LABEL = "Audio:"


@dataclass(frozen=True)
class ProbeResult:
    """Parsed metadata plus the raw text it was parsed from."""

    metadata: MediaMetadata
    raw_output: str


def parse_probe_output(output: str) -> MediaMetadata:
    """Extract container and stream fields from ffprobe's diagnostic text.

    Single pass over the lines in the order ffprobe printed them. Lines
    that match nothing are ignored; empty input yields the default record.

    When several ``Video:`` or ``Audio:`` lines are present the last one
    is kept.
    """
    primary_format = UNKNOWN
    identifiers: set[str] = set()
    duration: str | None = None
    video_summary = UNKNOWN
    audio_summary: str | None = None

    for line in output.split("\n"):
        if line.startswith(_INPUT_PREFIX):
            end = line.find(_FROM_MARKER)
            if end != -1:
                segment = line[len(_INPUT_PREFIX):end]
                tokens = [token.strip() for token in segment.split(",")]
                tokens = [token for token in tokens if token]
                identifiers.update(token.lower() for token in tokens)
                primary_format = tokens[0].upper() if tokens else UNKNOWN

        if _DURATION_LABEL in line:
            for part in line.split(","):
                if _DURATION_LABEL in part:
                    duration = part.replace(_DURATION_LABEL, "").strip()
                    break

        if _VIDEO_LABEL in line:
            video_summary = line[line.index(_VIDEO_LABEL):].strip()

        if _AUDIO_LABEL in line:
            audio_summary = line[line.index(_AUDIO_LABEL):].strip()

    return MediaMetadata(
        primary_format=primary_format,
        format_identifiers=frozenset(identifiers),
        duration=duration,
        video_summary=video_summary,
        audio_summary=audio_summary,
    )


def probe_media(input_path: Path | str, runner: FFmpegRunner | None = None) -> ProbeResult:
    """Run ffprobe on *input_path* and parse its report.

    Raises:
        ProcessError: ffprobe exited non-zero or could not be started.
    """
    runner = runner or get_ffmpeg_runner()
    output = runner.probe(input_path)
    return ProbeResult(metadata=parse_probe_output(output), raw_output=output)
