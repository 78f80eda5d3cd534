"""Per-selection conversion state (pure Python, no Qt dependency)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from koda.models.conversion_preset import ConversionPreset
from koda.models.media_metadata import MediaMetadata


class ConversionState(Enum):
    IDLE = "idle"
    FETCHING_METADATA = "fetching_metadata"
    READY = "ready"
    CONVERTING = "converting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


# States from which a (re)conversion may start
CONVERTIBLE_STATES = frozenset({
    ConversionState.READY,
    ConversionState.SUCCEEDED,
    ConversionState.FAILED,
})


@dataclass
class ConversionSession:
    """Everything that belongs to one chosen input file.

    Selecting a new input replaces the session instead of clearing fields.
    """

    input_path: Path | None = None
    generation: int = 0
    state: ConversionState = ConversionState.IDLE
    metadata: MediaMetadata | None = None
    metadata_raw_output: str = ""
    metadata_error: str = ""
    presets: list[ConversionPreset] = field(default_factory=list)
    is_fallback: bool = False
    selected_preset_id: str | None = None
    output_path: Path | None = None
    log: str = ""
    status_message: str = ""

    @property
    def selected_preset(self) -> ConversionPreset | None:
        for preset in self.presets:
            if preset.identity == self.selected_preset_id:
                return preset
        return None

    @property
    def is_busy(self) -> bool:
        return self.state in (ConversionState.FETCHING_METADATA, ConversionState.CONVERTING)

    @property
    def can_convert(self) -> bool:
        return (
            self.state in CONVERTIBLE_STATES
            and self.input_path is not None
            and self.selected_preset is not None
        )
