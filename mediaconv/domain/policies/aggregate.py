# mediaconv/domain/policies/aggregate.py
from __future__ import annotations

from dataclasses import replace
from typing import Collection, List, Optional, Sequence, Tuple, TypeVar

from mediaconv.domain.dataclasses.probe import GeneralFacts
from mediaconv.domain.entities.media import (
    AudioStream,
    MediaDescriptor,
    Part,
    Stream,
    TextStream,
    VideoStream,
)
from mediaconv.domain.ports.resolution import ResolutionPort

S = TypeVar("S", bound=Stream)

MATROSKA_CONTAINERS = ("mkv", "webm")

# (upper bound, bucket): the first bound the raw ratio is strictly below wins
ASPECT_BUCKETS: Tuple[Tuple[float, float], ...] = (
    (1.50, 1.33),
    (1.72, 1.66),
    (1.815, 1.78),
    (2.025, 1.85),
    (2.275, 2.20),
)
ASPECT_TOP_BUCKET = 2.35

FRAME_RATE_LABELS = {"25p": "PAL", "25i": "PAL", "30p": "NTSC", "30i": "NTSC"}


def aspect_ratio_bucket(width: float, height: float, pixel_aspect: float = 1.0) -> float:
    raw = width / height * pixel_aspect
    for bound, bucket in ASPECT_BUCKETS:
        if raw < bound:
            return bucket
    return ASPECT_TOP_BUCKET


def frame_rate_label(frame_rate: float, scan_type: Optional[str] = None) -> str:
    label = str(int(round(frame_rate)))
    label += "i" if scan_type and "int" in scan_type.lower() else "p"
    return FRAME_RATE_LABELS.get(label, label)


def single_stream_defaults(streams: Sequence[S]) -> List[S]:
    """With a single candidate there's nothing to disambiguate: default/forced drop to 0."""
    if len(streams) == 1:
        return [replace(streams[0], default=0, forced=0)]
    return list(streams)


def renumber_streams(
    streams: Sequence[Stream],
    container: Optional[str],
    matroska: Collection[str] = MATROSKA_CONTAINERS,
) -> Tuple[Stream, ...]:
    """
    Assign final indices. Non-matroska containers are numbered sequentially in
    discovery order. Matroska keeps the probe's track numbers shifted down to
    zero, unless one is missing or non-positive (track numbers are 1-based),
    in which case it falls back to sequential numbering.
    """
    if container not in matroska:
        return tuple(replace(s, index=i) for i, s in enumerate(streams))

    indices = sorted(s.index if s.index is not None else -1 for s in streams)
    if any(i <= 0 for i in indices):
        return tuple(replace(s, index=i) for i, s in enumerate(streams))

    low = indices[0] if indices else 0
    shifted = [replace(s, index=s.index - low) for s in streams]
    return tuple(sorted(shifted, key=lambda s: s.index))


def _codec_summary(stream: Stream) -> Optional[str]:
    return stream.codec or stream.codec_id


def derive_descriptor(
    general: GeneralFacts,
    videos: Sequence[VideoStream],
    audios: Sequence[AudioStream],
    texts: Sequence[TextStream],
    *,
    resolution: Optional[ResolutionPort] = None,
    matroska: Collection[str] = MATROSKA_CONTAINERS,
) -> MediaDescriptor:
    """
    Fold translated streams and container facts into one MediaDescriptor.
    The first stream of each kind is the primary one.
    """
    container = general.container or None
    duration = general.duration or 0

    if container == "flv":
        audios = [replace(a, codec="adpcm_swf") if a.codec == "adpcm" else a for a in audios]

    videos = single_stream_defaults(videos)
    audios = single_stream_defaults(audios)
    texts = single_stream_defaults(texts)

    for s in (*videos, *audios):
        if s.duration and s.duration > duration:
            duration = s.duration

    width = height = None
    video_resolution = aspect = frame_label = video_codec = None
    if videos:
        v = videos[0]
        width, height = v.width, v.height
        if width and height:
            if resolution is not None:
                video_resolution = resolution(width, height)
            aspect = aspect_ratio_bucket(width, height, v.pixel_aspect)
        if v.frame_rate:
            frame_label = frame_rate_label(v.frame_rate, v.scan_type)
        video_codec = _codec_summary(v)

        if not v.bitrate and general.bitrate:
            audio_total = sum(a.bitrate or 0 for a in audios)
            videos[0] = replace(v, bitrate=general.bitrate - audio_total)

    audio_codec = audio_channels = None
    if audios:
        audio_codec = _codec_summary(audios[0])
        audio_channels = audios[0].channels

    streams = renumber_streams([*videos, *audios, *texts], container, matroska)

    part = Part(
        size=general.size,
        duration=duration,
        container=container,
        streams=streams,
    )
    return MediaDescriptor(
        container=container,
        duration=duration,
        bitrate=general.bitrate,
        width=width,
        height=height,
        video_resolution=video_resolution,
        aspect_ratio=aspect,
        video_frame_rate=frame_label,
        chaptered=general.menu_count > 0,
        video_codec=video_codec,
        audio_codec=audio_codec,
        audio_channels=audio_channels,
        parts=(part,),
    )
