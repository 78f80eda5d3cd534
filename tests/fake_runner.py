"""Test double for FFmpegRunner used by the controller and window tests."""

from __future__ import annotations

import threading
from pathlib import Path

MP4_REPORT = (
    "Input #0, mp4,mov,m4a, from 'clip.mp4':\n"
    "  Duration: 00:01:02.34, start: 0.000000, bitrate: 2000 kb/s\n"
    "  Stream #0:0: Video: h264 (High), yuv420p, 1280x720\n"
    "  Stream #0:1: Audio: aac (LC), 44100 Hz, stereo\n"
)


class FakeRunner:
    """Stands in for FFmpegRunner; optional gates block a call until released."""

    def __init__(self, probe_outputs=None, transcode_result=""):
        self.probe_outputs = probe_outputs or {}
        self.transcode_result = transcode_result
        self.probe_gates: dict[str, threading.Event] = {}
        self.transcode_gate: threading.Event | None = None
        self.transcode_started = threading.Event()
        self.probe_calls: list[str] = []
        self.transcode_calls: list[list[str]] = []
        self.completed_probes = 0

    def probe(self, input_path):
        name = Path(input_path).name
        self.probe_calls.append(name)
        gate = self.probe_gates.get(name)
        if gate is not None:
            gate.wait(5)
        try:
            result = self.probe_outputs.get(name, MP4_REPORT)
            if isinstance(result, Exception):
                raise result
            return result
        finally:
            self.completed_probes += 1

    def transcode(self, arguments):
        self.transcode_calls.append(list(arguments))
        self.transcode_started.set()
        if self.transcode_gate is not None:
            self.transcode_gate.wait(5)
        if isinstance(self.transcode_result, Exception):
            raise self.transcode_result
        return self.transcode_result
