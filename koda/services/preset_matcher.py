"""Select the conversion presets to offer for a probed file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from koda.models.container import Container
from koda.models.conversion_preset import PRESET_LIBRARY, ConversionPreset
from koda.models.media_metadata import MediaMetadata


@dataclass(frozen=True)
class PresetMatch:
    """Presets to offer, in catalog order.

    ``is_fallback`` is True when the list was not narrowed by a real
    container match (no metadata, or nothing matched).
    """

    presets: tuple[ConversionPreset, ...]
    is_fallback: bool

    @property
    def default_preset(self) -> ConversionPreset | None:
        return self.presets[0] if self.presets else None


def match_presets(
    metadata: MediaMetadata | None,
    library: Sequence[ConversionPreset] = PRESET_LIBRARY,
) -> PresetMatch:
    """Filter *library* against the containers detected in *metadata*.

    A preset is kept when it is universal or one of its supported
    containers is among the metadata's format identifiers; identifiers
    outside the container vocabulary never match. Falls back to the
    whole library when there is no metadata or the filter leaves nothing.
    """
    full = tuple(library)
    if metadata is None:
        return PresetMatch(full, is_fallback=True)

    detected = metadata.containers - {Container.OTHER}
    filtered = tuple(
        preset for preset in full
        if preset.is_universal or not detected.isdisjoint(preset.supported_containers)
    )
    if not filtered:
        return PresetMatch(full, is_fallback=True)
    return PresetMatch(filtered, is_fallback=False)
