# mediaconv/domain/entities/media.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from mediaconv.domain.enums.stream_kind import StreamKind


@dataclass(frozen=True)
class Stream:
    """
    One elementary track of a container, already normalized.
    Tri-state flags (default, forced, cabac, qpel, ...) use None for "not reported".
    """
    kind: StreamKind
    id: Optional[int] = None
    codec: Optional[str] = None
    codec_id: Optional[str] = None
    title: Optional[str] = None
    language: Optional[str] = None
    language_code: Optional[str] = None
    bitrate: Optional[int] = None  # kbit/s
    index: Optional[int] = None
    default: Optional[int] = None
    forced: Optional[int] = None

    @property
    def stream_type(self) -> int:
        return self.kind.stream_type


@dataclass(frozen=True)
class VideoStream(Stream):
    kind: StreamKind = StreamKind.video
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None  # ms
    scan_type: Optional[str] = None
    profile: Optional[str] = None
    level: Optional[int] = None
    frame_rate: Optional[float] = None
    frame_rate_mode: Optional[str] = None
    color_space: Optional[str] = None
    chroma_subsampling: Optional[str] = None
    bit_depth: Optional[int] = None
    ref_frames: Optional[int] = None
    cabac: Optional[int] = None
    qpel: Optional[int] = None
    gmc: Optional[str] = None
    bvop: Optional[int] = None
    orientation: Optional[int] = None
    pixel_aspect: float = 1.0
    pixel_aspect_ratio: Optional[str] = None
    has_scaling_matrix: Optional[int] = None
    header_stripping: Optional[int] = None


@dataclass(frozen=True)
class AudioStream(Stream):
    kind: StreamKind = StreamKind.audio
    duration: Optional[int] = None  # ms
    sampling_rate: Optional[int] = None
    channels: Optional[int] = None
    profile: Optional[str] = None
    bitrate_mode: Optional[str] = None
    dialog_norm: Optional[str] = None
    bit_depth: Optional[int] = None


@dataclass(frozen=True)
class TextStream(Stream):
    kind: StreamKind = StreamKind.text
    format: Optional[str] = None


@dataclass(frozen=True)
class Part:
    size: Optional[int] = None
    duration: Optional[int] = None  # ms
    container: Optional[str] = None
    optimized_for_streaming: bool = False
    has_64bit_offsets: bool = False
    # final presentation/index order
    streams: Tuple[Stream, ...] = ()

    @property
    def video_streams(self) -> Tuple[VideoStream, ...]:
        return tuple(s for s in self.streams if isinstance(s, VideoStream))

    @property
    def audio_streams(self) -> Tuple[AudioStream, ...]:
        return tuple(s for s in self.streams if isinstance(s, AudioStream))

    @property
    def text_streams(self) -> Tuple[TextStream, ...]:
        return tuple(s for s in self.streams if isinstance(s, TextStream))


@dataclass(frozen=True)
class MediaDescriptor:
    """
    Canonical description of one probed file. Built once by the aggregate
    deriver and handed to the caller; nothing in the engine keeps a reference.
    """
    container: Optional[str] = None
    duration: Optional[int] = None  # ms
    bitrate: Optional[int] = None  # kbit/s
    width: Optional[int] = None
    height: Optional[int] = None
    video_resolution: Optional[str] = None
    aspect_ratio: Optional[float] = None
    video_frame_rate: Optional[str] = None
    chaptered: bool = False
    optimized_for_streaming: bool = False
    has_64bit_offsets: bool = False
    video_codec: Optional[str] = None
    audio_codec: Optional[str] = None
    audio_channels: Optional[int] = None
    parts: Tuple[Part, ...] = ()

    @property
    def part(self) -> Part:
        return self.parts[0]
