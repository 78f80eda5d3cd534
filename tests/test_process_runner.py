"""Tests for the process execution layer."""

from __future__ import annotations

import subprocess
from unittest.mock import patch

import pytest

from koda.infrastructure.process_runner import (
    LAUNCH_FAILURE_STATUS,
    FFmpegRunner,
    ProcessError,
    ProcessRunner,
    merge_output,
)


def _completed(returncode: int = 0, stdout: str = "", stderr: str = "") -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


class TestMergeOutput:
    def test_stderr_then_stdout_with_separator(self):
        assert merge_output("err", "out") == "err\nout"

    def test_no_extra_newline_when_stderr_ends_with_one(self):
        assert merge_output("err\n", "out") == "err\nout"

    def test_empty_stderr(self):
        assert merge_output("", "out") == "out"

    def test_empty_stdout_keeps_stderr_untouched(self):
        assert merge_output("err", "") == "err"

    def test_both_empty(self):
        assert merge_output("", "") == ""


class TestProcessRunner:
    @patch("koda.infrastructure.process_runner.subprocess.run")
    def test_success_returns_merged_output(self, mock_run):
        mock_run.return_value = _completed(0, stdout="out", stderr="err")
        result = ProcessRunner().run("tool", ["-a", "b"])
        assert result == "err\nout"

    @patch("koda.infrastructure.process_runner.subprocess.run")
    def test_command_line_is_command_plus_arguments(self, mock_run):
        mock_run.return_value = _completed(0)
        ProcessRunner().run("ffprobe", ["-hide_banner", "/tmp/in file.mov"])
        cmd = mock_run.call_args[0][0]
        assert cmd == ["ffprobe", "-hide_banner", "/tmp/in file.mov"]
        assert mock_run.call_args.kwargs["capture_output"] is True

    @patch("koda.infrastructure.process_runner.subprocess.run")
    def test_collect_stdout_only(self, mock_run):
        mock_run.return_value = _completed(0, stdout="clean", stderr="noise")
        assert ProcessRunner().run("tool", [], collect_stdout=True) == "clean"

    @patch("koda.infrastructure.process_runner.subprocess.run")
    def test_success_is_exit_status_zero_even_without_output(self, mock_run):
        mock_run.return_value = _completed(0)
        assert ProcessRunner().run("tool", []) == ""

    @patch("koda.infrastructure.process_runner.subprocess.run")
    def test_failure_prefers_stderr_trimmed(self, mock_run):
        mock_run.return_value = _completed(1, stdout="out", stderr="  bad input\n")
        with pytest.raises(ProcessError) as exc_info:
            ProcessRunner().run("tool", [])
        assert exc_info.value.status == 1
        assert exc_info.value.message == "bad input"
        assert str(exc_info.value) == "Process exited with status 1: bad input"

    @patch("koda.infrastructure.process_runner.subprocess.run")
    def test_failure_falls_back_to_stdout(self, mock_run):
        mock_run.return_value = _completed(2, stdout="\nonly stdout\n", stderr="")
        with pytest.raises(ProcessError) as exc_info:
            ProcessRunner().run("tool", [])
        assert exc_info.value.message == "only stdout"

    @patch("koda.infrastructure.process_runner.subprocess.run")
    def test_failure_without_output_uses_placeholder_for_display(self, mock_run):
        mock_run.return_value = _completed(3)
        with pytest.raises(ProcessError) as exc_info:
            ProcessRunner().run("tool", [])
        assert exc_info.value.message == ""
        assert exc_info.value.display_message == "Process exited with an unknown error."

    @patch("koda.infrastructure.process_runner.subprocess.run")
    def test_missing_tool_surfaces_as_process_error(self, mock_run):
        mock_run.side_effect = FileNotFoundError(2, "No such file or directory")
        with pytest.raises(ProcessError) as exc_info:
            ProcessRunner().run("does-not-exist", [])
        assert exc_info.value.status == LAUNCH_FAILURE_STATUS
        assert "No such file or directory" in exc_info.value.message

    @patch("koda.infrastructure.process_runner.subprocess.run")
    def test_single_attempt_no_retry(self, mock_run):
        mock_run.return_value = _completed(1, stderr="boom")
        with pytest.raises(ProcessError):
            ProcessRunner().run("tool", [])
        assert mock_run.call_count == 1


class TestFFmpegRunner:
    @patch("koda.infrastructure.process_runner.subprocess.run")
    def test_probe_command(self, mock_run):
        mock_run.return_value = _completed(0, stderr="Input #0, mov, from 'a.mov':")
        runner = FFmpegRunner(ffmpeg_path="/opt/ffmpeg", ffprobe_path="/opt/ffprobe")
        output = runner.probe("/videos/a.mov")
        assert mock_run.call_args[0][0] == ["/opt/ffprobe", "-hide_banner", "/videos/a.mov"]
        assert output.startswith("Input #0")

    @patch("koda.infrastructure.process_runner.subprocess.run")
    def test_transcode_command(self, mock_run):
        mock_run.return_value = _completed(0)
        runner = FFmpegRunner(ffmpeg_path="/opt/ffmpeg", ffprobe_path="/opt/ffprobe")
        runner.transcode(["-hide_banner", "-y", "-i", "in.mov", "out.mp4"])
        assert mock_run.call_args[0][0] == [
            "/opt/ffmpeg", "-hide_banner", "-y", "-i", "in.mov", "out.mp4",
        ]

    @patch("koda.infrastructure.process_runner.find_ffprobe", return_value=None)
    @patch("koda.infrastructure.process_runner.find_ffmpeg", return_value=None)
    @patch("koda.infrastructure.process_runner.subprocess.run")
    def test_undiscovered_tools_fall_back_to_command_names(self, mock_run, _ffmpeg, _ffprobe):
        mock_run.return_value = _completed(0)
        runner = FFmpegRunner()
        runner.probe("clip.mp4")
        assert mock_run.call_args[0][0][0] == "ffprobe"
        runner.transcode(["out.mp4"])
        assert mock_run.call_args[0][0][0] == "ffmpeg"
