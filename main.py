"""Koda application entry point."""

import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication
from PySide6.QtGui import QColor, QPalette

from koda.utils.config import APP_NAME, ORG_NAME
from koda.utils.i18n import init_language
from koda.services.settings_manager import SettingsManager
from koda.ui.main_window import MainWindow


def _apply_dark_theme(app: QApplication) -> None:
    """Apply a dark color palette using the Fusion style."""
    app.setStyle("Fusion")
    palette = QPalette()

    # Base colors
    palette.setColor(QPalette.ColorRole.Window, QColor(45, 45, 45))
    palette.setColor(QPalette.ColorRole.WindowText, QColor(212, 212, 212))
    palette.setColor(QPalette.ColorRole.Base, QColor(30, 30, 30))
    palette.setColor(QPalette.ColorRole.AlternateBase, QColor(45, 45, 45))
    palette.setColor(QPalette.ColorRole.Text, QColor(212, 212, 212))
    palette.setColor(QPalette.ColorRole.Button, QColor(55, 55, 55))
    palette.setColor(QPalette.ColorRole.ButtonText, QColor(212, 212, 212))

    # Highlight
    palette.setColor(QPalette.ColorRole.Highlight, QColor(60, 140, 220))
    palette.setColor(QPalette.ColorRole.HighlightedText, QColor(255, 255, 255))

    # Disabled
    palette.setColor(QPalette.ColorGroup.Disabled, QPalette.ColorRole.WindowText, QColor(120, 120, 120))
    palette.setColor(QPalette.ColorGroup.Disabled, QPalette.ColorRole.Text, QColor(120, 120, 120))
    palette.setColor(QPalette.ColorGroup.Disabled, QPalette.ColorRole.ButtonText, QColor(120, 120, 120))

    app.setPalette(palette)


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s [%(levelname)s] %(message)s",
    )
    QApplication.setOrganizationName(ORG_NAME)
    QApplication.setApplicationName(APP_NAME)

    app = QApplication(sys.argv)
    _apply_dark_theme(app)

    # Initialize UI language from settings
    _settings = SettingsManager()
    init_language(_settings.get_ui_language())

    window = MainWindow()
    window.show()

    # Allow opening a video via command-line argument
    if len(sys.argv) > 1:
        video_path = Path(sys.argv[1])
        if video_path.is_file():
            window.load_video(video_path)

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
