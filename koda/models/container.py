"""Container identifier vocabulary (pure Python, no Qt dependency)."""

from __future__ import annotations

from enum import Enum


class Container(str, Enum):
    """Media containers known to the preset catalog.

    Values are the lowercase identifiers the presets declare. Any other
    token, including ffprobe long names such as ``matroska``, maps to
    ``OTHER``, which no preset lists.
    """

    MOV = "mov"
    MP4 = "mp4"
    M4A = "m4a"
    M4V = "m4v"
    MKV = "mkv"
    WEBM = "webm"
    AVI = "avi"
    FLV = "flv"
    MXF = "mxf"
    WMV = "wmv"
    MPG = "mpg"
    MPEG = "mpeg"
    TS = "ts"
    OTHER = "other"

    @classmethod
    def from_token(cls, token: str) -> Container:
        """Map an ffprobe format token to a member, ``OTHER`` if unknown."""
        key = token.strip().lower()
        try:
            return cls(key)
        except ValueError:
            return cls.OTHER


def containers_from_identifiers(identifiers) -> frozenset[Container]:
    """Map a collection of lowercase identifiers onto the vocabulary."""
    return frozenset(Container.from_token(token) for token in identifiers)
