"""Tests for ffmpeg/ffprobe discovery and command-line formatting."""

import sys
from unittest.mock import MagicMock, patch

from koda.services.ffmpeg_logger import format_command_line
from koda.utils.ffmpeg_utils import _configured_path, find_ffmpeg, find_ffprobe


def _no_settings(key):
    return None


class TestFindFFmpeg:
    def test_configured_path_wins(self, tmp_path):
        custom = tmp_path / "my-ffmpeg"
        custom.touch()
        with patch("koda.utils.ffmpeg_utils._configured_path", return_value=str(custom)), \
             patch("koda.utils.ffmpeg_utils.shutil.which", return_value="/usr/bin/ffmpeg"):
            assert find_ffmpeg() == str(custom)

    def test_missing_configured_path_is_ignored(self, tmp_path):
        with patch("koda.utils.ffmpeg_utils._configured_path", return_value=str(tmp_path / "gone")), \
             patch("koda.utils.config.FFMPEG_PATH", str(tmp_path / "missing")), \
             patch("koda.utils.ffmpeg_utils.shutil.which", return_value="/usr/bin/ffmpeg"):
            assert find_ffmpeg() == "/usr/bin/ffmpeg"

    def test_path_wins_over_platform_default(self, tmp_path):
        default = tmp_path / "default-ffmpeg"
        default.touch()
        with patch("koda.utils.ffmpeg_utils._configured_path", _no_settings), \
             patch("koda.utils.config.FFMPEG_PATH", str(default)), \
             patch("koda.utils.ffmpeg_utils.shutil.which", return_value="/usr/local/bin/ffmpeg"):
            assert find_ffmpeg() == "/usr/local/bin/ffmpeg"

    def test_platform_default_when_not_in_path(self, tmp_path):
        default = tmp_path / "default-ffmpeg"
        default.touch()
        with patch("koda.utils.ffmpeg_utils._configured_path", _no_settings), \
             patch("koda.utils.config.FFMPEG_PATH", str(default)), \
             patch("koda.utils.ffmpeg_utils.shutil.which", return_value=None):
            assert find_ffmpeg() == str(default)

    def test_bundled_fallback(self, tmp_path):
        with patch("koda.utils.ffmpeg_utils._configured_path", _no_settings), \
             patch("koda.utils.config.FFMPEG_PATH", str(tmp_path / "missing")), \
             patch("koda.utils.ffmpeg_utils.shutil.which", return_value=None), \
             patch("koda.utils.ffmpeg_bundled.get_bundled_ffmpeg", return_value="/bundled/ffmpeg"):
            assert find_ffmpeg() == "/bundled/ffmpeg"

    def test_nothing_found(self, tmp_path):
        with patch("koda.utils.ffmpeg_utils._configured_path", _no_settings), \
             patch("koda.utils.config.FFMPEG_PATH", str(tmp_path / "missing")), \
             patch("koda.utils.ffmpeg_utils.shutil.which", return_value=None), \
             patch("koda.utils.ffmpeg_bundled.get_bundled_ffmpeg", side_effect=RuntimeError("offline")):
            assert find_ffmpeg() is None


class TestFindFFprobe:
    def test_found_in_path(self):
        with patch("koda.utils.ffmpeg_utils._configured_path", _no_settings), \
             patch("koda.utils.ffmpeg_utils.shutil.which", return_value="/usr/bin/ffprobe"):
            assert find_ffprobe() == "/usr/bin/ffprobe"

    def test_found_next_to_ffmpeg(self, tmp_path):
        ffmpeg = tmp_path / "ffmpeg"
        ffprobe = tmp_path / ("ffprobe.exe" if sys.platform == "win32" else "ffprobe")
        ffmpeg.touch()
        ffprobe.touch()
        with patch("koda.utils.ffmpeg_utils._configured_path", _no_settings), \
             patch("koda.utils.ffmpeg_utils.shutil.which", return_value=None), \
             patch("koda.utils.ffmpeg_utils.find_ffmpeg", return_value=str(ffmpeg)):
            assert find_ffprobe() == str(ffprobe)


class TestFormatCommandLine:
    def test_plain_arguments(self):
        assert format_command_line(["ffmpeg", "-y", "-i", "a.mov"]) == "ffmpeg -y -i a.mov"

    def test_arguments_with_spaces_are_quoted(self):
        line = format_command_line(["ffmpeg", "-i", "/tmp/my clip.mov", "out (1).mp4"])
        assert line == 'ffmpeg -i "/tmp/my clip.mov" "out (1).mp4"'


class TestConfiguredPath:
    @patch("koda.utils.ffmpeg_utils.SettingsManager")
    def test_reads_tool_specific_setting(self, mock_settings_cls):
        settings = MagicMock()
        settings.get_ffmpeg_path.return_value = "/custom/ffmpeg"
        settings.get_ffprobe_path.return_value = None
        mock_settings_cls.return_value = settings

        assert _configured_path("ffmpeg") == "/custom/ffmpeg"
        assert _configured_path("ffprobe") is None
