"""Destination path resolution that never overwrites an existing file."""

from __future__ import annotations

from pathlib import Path


def resolve_output_path(input_path: Path | str, extension: str) -> Path:
    """Return ``<dir>/<stem>.<extension>`` or the first free ``<stem> (N).<extension>``.

    Existence is re-checked for every candidate; nothing is created.
    """
    input_path = Path(input_path)
    directory = input_path.parent
    base_name = input_path.stem
    extension = extension.lstrip(".")

    candidate = directory / f"{base_name}.{extension}"
    index = 1
    while candidate.exists():
        candidate = directory / f"{base_name} ({index}).{extension}"
        index += 1
    return candidate
