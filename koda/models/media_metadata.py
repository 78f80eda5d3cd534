"""Media metadata record derived from ffprobe output (pure Python, no Qt dependency)."""

from __future__ import annotations

from dataclasses import dataclass, field

from koda.models.container import Container, containers_from_identifiers

UNKNOWN = "Unknown"


@dataclass(frozen=True)
class MediaMetadata:
    """Container and stream summary of one input file.

    Built once per probe run and never mutated; a new selection
    replaces the whole record.
    """

    primary_format: str = UNKNOWN
    format_identifiers: frozenset[str] = field(default_factory=frozenset)
    duration: str | None = None
    video_summary: str = UNKNOWN
    audio_summary: str | None = None

    @property
    def format_summary(self) -> str:
        """Sorted, comma-joined uppercase identifiers, else the primary format."""
        if not self.format_identifiers:
            return self.primary_format
        return ", ".join(sorted(self.format_identifiers)).upper()

    @property
    def containers(self) -> frozenset[Container]:
        return containers_from_identifiers(self.format_identifiers)
