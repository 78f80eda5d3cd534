"""Conversion preset data models (pure Python, no Qt dependency)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from koda.models.container import Container as C


@dataclass(frozen=True)
class ConversionPreset:
    """A named, fixed bundle of ffmpeg options plus container compatibility."""

    identity: str
    name: str
    description: str
    output_extension: str                     # without the dot: "mp4", "gif"
    supported_containers: frozenset[C] = field(default_factory=frozenset)  # empty = universal
    options: tuple[str, ...] = ()

    @property
    def is_universal(self) -> bool:
        return not self.supported_containers

    @property
    def file_extension(self) -> str:
        return f".{self.output_extension}"

    def build_arguments(self, input_path: Path | str, output_path: Path | str) -> list[str]:
        """Full ffmpeg argument list (binary excluded) for this preset."""
        args = ["-hide_banner", "-y", "-i", str(input_path)]
        args.extend(self.options)
        args.append(str(output_path))
        return args


PRESET_LIBRARY: tuple[ConversionPreset, ...] = (
    ConversionPreset(
        identity="mp4-h264-aac",
        name="High Compatibility MP4 (H.264/AAC)",
        description="Generate an MP4 with H.264 video and AAC audio for maximum device compatibility.",
        output_extension="mp4",
        supported_containers=frozenset({C.MOV, C.MP4, C.M4V, C.MKV, C.AVI, C.WEBM, C.FLV}),
        options=("-c:v", "libx264", "-preset", "medium", "-crf", "20", "-c:a", "aac", "-b:a", "192k"),
    ),
    ConversionPreset(
        identity="mp4-hevc",
        name="HEVC MP4 (H.265)",
        description="Compress with the HEVC codec for smaller files at similar quality.",
        output_extension="mp4",
        supported_containers=frozenset({C.MOV, C.MP4, C.M4V, C.MKV}),
        options=("-c:v", "libx265", "-tag:v", "hvc1", "-preset", "slow", "-crf", "24", "-c:a", "aac", "-b:a", "192k"),
    ),
    ConversionPreset(
        identity="mov-prores422",
        name="ProRes 422 MOV",
        description="Create a mezzanine-quality Apple ProRes 422 file for editing workflows.",
        output_extension="mov",
        supported_containers=frozenset({C.MOV, C.MP4, C.M4V, C.MXF, C.AVI}),
        options=("-c:v", "prores_ks", "-profile:v", "3", "-pix_fmt", "yuv422p10le", "-c:a", "pcm_s16le"),
    ),
    ConversionPreset(
        identity="webm-vp9",
        name="WebM VP9",
        description="Produce a WebM container with VP9 video and Opus audio for web delivery.",
        output_extension="webm",
        supported_containers=frozenset({C.MOV, C.MP4, C.M4V, C.MKV, C.FLV, C.AVI, C.WEBM}),
        options=("-c:v", "libvpx-vp9", "-b:v", "0", "-crf", "32", "-c:a", "libopus", "-b:a", "128k"),
    ),
    ConversionPreset(
        identity="avi-mpeg4",
        name="Legacy AVI (MPEG-4 Part 2)",
        description="Create an AVI file compatible with older hardware and software.",
        output_extension="avi",
        supported_containers=frozenset({C.MOV, C.MP4, C.M4V, C.MKV, C.WMV, C.FLV, C.MPG, C.MPEG, C.AVI}),
        options=("-c:v", "mpeg4", "-q:v", "5", "-c:a", "libmp3lame", "-b:a", "160k"),
    ),
    ConversionPreset(
        identity="gif-palette",
        name="Animated GIF",
        description="Turn the video into an animated GIF with palette generation for better colors.",
        output_extension="gif",
        options=(
            "-filter_complex",
            "[0:v] fps=12,scale=640:-1:flags=lanczos,split [a][b];"
            "[a] palettegen=stats_mode=diff [p];[b][p] paletteuse=new=1",
            "-an",
        ),
    ),
    ConversionPreset(
        identity="mkv-h264",
        name="Matroska H.264",
        description="Wrap H.264 video and AAC audio in an MKV container.",
        output_extension="mkv",
        supported_containers=frozenset({C.MOV, C.MP4, C.M4V, C.AVI, C.MPG, C.MPEG, C.FLV, C.MKV, C.TS}),
        options=("-c:v", "libx264", "-preset", "faster", "-crf", "20", "-c:a", "aac", "-b:a", "192k"),
    ),
    ConversionPreset(
        identity="m4a-aac",
        name="Audio Only (AAC m4a)",
        description="Extract the audio track into an AAC .m4a file.",
        output_extension="m4a",
        options=("-vn", "-c:a", "aac", "-b:a", "192k"),
    ),
)
