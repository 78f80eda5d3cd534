"""메인 윈도우 — ConversionController 상태를 표시하고 명령을 전달."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtGui import QFontDatabase
from PySide6.QtWidgets import (
    QComboBox,
    QFileDialog,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPlainTextEdit,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from koda.models.conversion_session import ConversionState
from koda.services.settings_manager import SettingsManager
from koda.ui.controllers.conversion_controller import ConversionController
from koda.utils.config import (
    APP_NAME,
    FFMPEG_LOG_MAX_HEIGHT,
    RAW_OUTPUT_MAX_HEIGHT,
    VIDEO_EXTENSIONS,
    WINDOW_MIN_HEIGHT,
    WINDOW_MIN_WIDTH,
)
from koda.utils.i18n import tr

_ERROR_COLOR = "#e05555"
_SUCCESS_COLOR = "#4caf50"
_SECONDARY_COLOR = "#9a9a9a"


def status_color(state: ConversionState, metadata_failed: bool = False) -> str:
    """Status label color: red for errors, green when finished."""
    if state == ConversionState.FAILED:
        return _ERROR_COLOR
    if state == ConversionState.READY and metadata_failed:
        return _ERROR_COLOR
    if state == ConversionState.SUCCEEDED:
        return _SUCCESS_COLOR
    return _SECONDARY_COLOR


def video_filter() -> str:
    """File dialog filter for the supported video extensions."""
    patterns = " ".join(f"*{ext}" for ext in VIDEO_EXTENSIONS)
    return f"{tr('Video Files')} ({patterns});;{tr('All Files')} (*)"


class MainWindow(QMainWindow):
    """Single-window converter UI. Holds no conversion state of its own."""

    def __init__(self, controller: ConversionController | None = None):
        super().__init__()
        self._controller = controller or ConversionController(parent=self)
        self._settings = SettingsManager()
        self._updating_presets = False
        self._close_pending = False

        self.setWindowTitle(APP_NAME)
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)
        self._build_ui()

        self._controller.session_changed.connect(self._refresh)
        self._controller.state_changed.connect(self._on_state_changed)
        self._refresh()

    @property
    def controller(self) -> ConversionController:
        return self._controller

    # ------------------------------------------------------------------ UI

    def _build_ui(self) -> None:
        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(16)

        # ── Header ──
        title = QLabel(tr("Universal Video Converter"))
        title_font = title.font()
        title_font.setPointSize(title_font.pointSize() + 10)
        title_font.setBold(True)
        title.setFont(title_font)
        layout.addWidget(title)
        subtitle = QLabel(tr(
            "Inspect a video with ffprobe and transcode it with ffmpeg using presets "
            "that adapt to the detected container and codecs."
        ))
        subtitle.setWordWrap(True)
        layout.addWidget(subtitle)
        layout.addWidget(self._secondary(QLabel(tr(
            "Requires ffmpeg and ffprobe to be installed and available in your PATH."
        ))))

        # ── File selection ──
        file_row = QHBoxLayout()
        self._choose_btn = QPushButton(tr("Choose Video…"))
        self._choose_btn.clicked.connect(self._on_choose_video)
        file_row.addWidget(self._choose_btn)
        file_col = QVBoxLayout()
        self._file_name_label = QLabel()
        self._file_name_label.setTextFormat(Qt.TextFormat.PlainText)
        name_font = self._file_name_label.font()
        name_font.setBold(True)
        self._file_name_label.setFont(name_font)
        self._file_path_label = self._secondary(QLabel())
        file_col.addWidget(self._file_name_label)
        file_col.addWidget(self._file_path_label)
        file_row.addLayout(file_col)
        file_row.addStretch()
        layout.addLayout(file_row)

        self._fetching_label = QLabel(tr("Reading metadata…"))
        layout.addWidget(self._fetching_label)
        self._metadata_error_label = QLabel()
        self._metadata_error_label.setWordWrap(True)
        self._metadata_error_label.setStyleSheet(f"color: {_ERROR_COLOR};")
        layout.addWidget(self._metadata_error_label)

        # ── Metadata ──
        self._metadata_box = QWidget()
        meta_layout = QVBoxLayout(self._metadata_box)
        meta_layout.setContentsMargins(0, 0, 0, 0)
        meta_layout.addWidget(self._heading(tr("Metadata")))
        grid = QGridLayout()
        grid.setHorizontalSpacing(24)
        self._meta_values: dict[str, QLabel] = {}
        for row, key in enumerate(("Container", "Detected formats", "Duration", "Video", "Audio")):
            grid.addWidget(self._secondary(QLabel(tr(key) + ":")), row, 0)
            value = QLabel()
            value.setWordWrap(True)
            grid.addWidget(value, row, 1)
            self._meta_values[key] = value
        meta_layout.addLayout(grid)
        meta_layout.addWidget(self._heading(tr("ffprobe output")))
        self._raw_output_view = self._monospace_view(RAW_OUTPUT_MAX_HEIGHT)
        meta_layout.addWidget(self._raw_output_view)
        layout.addWidget(self._metadata_box)

        # ── Presets ──
        self._preset_box = QWidget()
        preset_layout = QVBoxLayout(self._preset_box)
        preset_layout.setContentsMargins(0, 0, 0, 0)
        preset_layout.addWidget(self._heading(tr("Available conversion presets")))
        self._preset_combo = QComboBox()
        self._preset_combo.setMaximumWidth(360)
        self._preset_combo.currentIndexChanged.connect(self._on_preset_changed)
        preset_layout.addWidget(self._preset_combo)
        self._fallback_label = self._secondary(QLabel(tr(
            "No metadata-specific recommendation was found, so the full preset library is shown."
        )))
        self._fallback_label.setWordWrap(True)
        preset_layout.addWidget(self._fallback_label)
        self._preset_desc_label = self._secondary(QLabel())
        self._preset_desc_label.setWordWrap(True)
        preset_layout.addWidget(self._preset_desc_label)
        layout.addWidget(self._preset_box)

        # ── Conversion ──
        convert_row = QHBoxLayout()
        self._convert_btn = QPushButton(tr("Convert"))
        self._convert_btn.clicked.connect(self._on_convert)
        convert_row.addWidget(self._convert_btn)
        self._busy_bar = QProgressBar()
        self._busy_bar.setRange(0, 0)
        self._busy_bar.setMaximumWidth(120)
        convert_row.addWidget(self._busy_bar)
        self._status_label = QLabel()
        self._status_label.setWordWrap(True)
        convert_row.addWidget(self._status_label, 1)
        layout.addLayout(convert_row)

        self._log_heading = self._heading(tr("ffmpeg log"))
        layout.addWidget(self._log_heading)
        self._log_view = self._monospace_view(FFMPEG_LOG_MAX_HEIGHT)
        layout.addWidget(self._log_view)

        layout.addStretch()
        self.setCentralWidget(central)

    @staticmethod
    def _heading(text: str) -> QLabel:
        label = QLabel(text)
        font = label.font()
        font.setBold(True)
        font.setPointSize(font.pointSize() + 3)
        label.setFont(font)
        return label

    @staticmethod
    def _secondary(label: QLabel) -> QLabel:
        label.setStyleSheet(f"color: {_SECONDARY_COLOR};")
        return label

    @staticmethod
    def _monospace_view(max_height: int) -> QPlainTextEdit:
        view = QPlainTextEdit()
        view.setReadOnly(True)
        view.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))
        view.setMaximumHeight(max_height)
        return view

    # ---------------------------------------------------------------- Logic

    def _on_choose_video(self) -> None:
        last_dir = self._settings.get_last_input_dir()
        path, _ = QFileDialog.getOpenFileName(self, tr("Choose Video…"), last_dir, video_filter())
        if not path:
            return
        self._settings.set_last_input_dir(str(Path(path).parent))
        self.load_video(Path(path))

    def load_video(self, path: Path) -> None:
        self._controller.select_input(path)

    def _on_preset_changed(self, index: int) -> None:
        if self._updating_presets or index < 0:
            return
        self._controller.select_preset(self._preset_combo.itemData(index))

    def _on_convert(self) -> None:
        self._controller.convert()

    def _refresh(self) -> None:
        """Redraw every section from the controller's session."""
        session = self._controller.session
        busy = session.is_busy

        self._choose_btn.setEnabled(session.state != ConversionState.CONVERTING)
        if session.input_path is not None:
            self._file_name_label.setText(session.input_path.name)
            self._file_path_label.setText(str(session.input_path))
        else:
            self._file_name_label.setText(tr("No video selected"))
            self._file_path_label.setText("")
        self._fetching_label.setVisible(session.state == ConversionState.FETCHING_METADATA)
        self._metadata_error_label.setText(session.metadata_error)
        self._metadata_error_label.setVisible(bool(session.metadata_error))

        metadata = session.metadata
        self._metadata_box.setVisible(metadata is not None)
        if metadata is not None:
            self._meta_values["Container"].setText(metadata.primary_format)
            self._meta_values["Detected formats"].setText(metadata.format_summary)
            self._meta_values["Duration"].setText(metadata.duration or tr("Unknown"))
            self._meta_values["Video"].setText(metadata.video_summary)
            self._meta_values["Audio"].setText(metadata.audio_summary or tr("None"))
            self._raw_output_view.setPlainText(session.metadata_raw_output)
            self._raw_output_view.setVisible(bool(session.metadata_raw_output))

        self._preset_box.setVisible(bool(session.presets))
        self._updating_presets = True
        try:
            self._preset_combo.clear()
            for preset in session.presets:
                self._preset_combo.addItem(preset.name, preset.identity)
            selected = self._preset_combo.findData(session.selected_preset_id)
            self._preset_combo.setCurrentIndex(selected)
        finally:
            self._updating_presets = False
        self._preset_combo.setEnabled(session.state != ConversionState.CONVERTING)
        self._fallback_label.setVisible(session.is_fallback)
        preset = session.selected_preset
        self._preset_desc_label.setText(preset.description if preset else "")

        self._convert_btn.setEnabled(session.can_convert)
        self._busy_bar.setVisible(busy)
        self._status_label.setText(session.status_message)
        self._status_label.setStyleSheet(f"color: {status_color(session.state, bool(session.metadata_error))};")

        self._log_heading.setVisible(bool(session.log))
        self._log_view.setVisible(bool(session.log))
        self._log_view.setPlainText(session.log)

    def _on_state_changed(self, state: ConversionState) -> None:
        if self._close_pending and state != ConversionState.CONVERTING:
            self.close()

    def closeEvent(self, event) -> None:
        # ffmpeg 실행 중에는 중단할 수 없으므로 변환이 끝난 뒤 닫음
        if self._controller.state == ConversionState.CONVERTING:
            self._close_pending = True
            self._status_label.setText(tr("The window will close when the conversion finishes."))
            event.ignore()
            return
        self._close_pending = False
        self._controller.wait_for_workers()
        super().closeEvent(event)
