from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GeneralFacts:
    # Container-level facts read from the General stream before any track is translated
    container: Optional[str] = None
    duration: int = 0  # ms
    size: Optional[int] = None
    bitrate: Optional[int] = None  # kbit/s
    menu_count: int = 0
    video_count: int = 0
    audio_count: int = 0
    text_count: int = 0


@dataclass(frozen=True)
class StreamingFlags:
    optimized_for_streaming: bool = False
    has_64bit_offsets: bool = False
