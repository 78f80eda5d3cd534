"""Settings manager for application preferences."""

from typing import Optional

from PySide6.QtCore import QSettings


class SettingsManager:
    """Wrapper around QSettings for type-safe preference management."""

    def __init__(self):
        self._settings = QSettings()

    # ---------------------------------------------------- General Settings

    def get_ui_language(self) -> str:
        """Get the UI language code (default: 'en')."""
        return self._settings.value("general/ui_language", "en", str)

    def get_last_input_dir(self) -> str:
        """Get the directory of the last chosen input video."""
        return self._settings.value("general/last_input_dir", "", str)

    def set_last_input_dir(self, directory: str) -> None:
        self._settings.setValue("general/last_input_dir", directory)

    # ---------------------------------------------------- Advanced Settings

    def get_ffmpeg_path(self) -> Optional[str]:
        """Get the custom FFmpeg path (None for auto-detect)."""
        path = self._settings.value("advanced/ffmpeg_path", "", str)
        return path if path else None

    def get_ffprobe_path(self) -> Optional[str]:
        """Get the custom FFprobe path (None for auto-detect)."""
        path = self._settings.value("advanced/ffprobe_path", "", str)
        return path if path else None
