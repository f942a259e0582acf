# mediaconv/domain/policies/fields.py
"""
Typed access to the probe's opaque ``get(kind, index, field)`` interface.

MediaInfo answers every question with a string. This is the only place that
text gets parsed; translators above it see ints, floats and tri-states.
"""
from __future__ import annotations

from typing import Optional

from mediaconv.common.probe import field_parsers as fp
from mediaconv.domain.enums.stream_kind import StreamKind
from mediaconv.domain.ports.probe import MediaProbePort

# General
F_FORMAT = "Format"
F_CODEC_ID = "CodecID"
F_DURATION = "Duration"
F_FILE_SIZE = "FileSize"
F_BITRATE = "BitRate"
F_MENU_COUNT = "MenuCount"
F_VIDEO_COUNT = "VideoCount"
F_AUDIO_COUNT = "AudioCount"
F_TEXT_COUNT = "TextCount"

# Common stream fields
F_UNIQUE_ID = "UniqueID"
F_ID = "ID"
F_CODEC = "Codec"
F_TITLE = "Title"
F_SUBTITLE = "Subtitle"
F_LANGUAGE_CODE3 = "Language/String3"
F_LANGUAGE_NAME = "Language/String1"
F_DEFAULT = "Default"
F_FORCED = "Forced"
F_FORMAT_PROFILE = "Format_Profile"
F_FORMAT_SETTINGS = "Format_Settings"
F_BIT_DEPTH = "BitDepth"

# Video
F_WIDTH = "Width"
F_HEIGHT = "Height"
F_SCAN_TYPE = "ScanType"
F_REF_FRAMES = "Format_Settings_RefFrames"
F_ROTATION = "Rotation"
F_MUXING_MODE = "MuxingMode"
F_CABAC = "Format_Settings_CABAC"
F_QPEL = "Format_Settings_QPel"
F_GMC = "Format_Settings_GMC"
F_BVOP = "Format_Settings_BVOP"
F_FRAME_RATE_MODE = "FrameRate_Mode"
F_FRAME_RATE = "FrameRate"
F_FRAME_RATE_ORIGINAL = "FrameRate_Original"
F_COLOR_SPACE = "ColorSpace"
F_CHROMA_SUBSAMPLING = "ChromaSubsampling"
F_PIXEL_ASPECT = "PixelAspectRatio"
F_PIXEL_ASPECT_ORIGINAL = "PixelAspectRatio_Original"

# Audio
F_SAMPLING_RATE = "SamplingRate"
F_CHANNELS = "Channel(s)"
F_CHANNELS_ORIGINAL = "Channel(s)_Original"
F_BITRATE_MODE = "BitRate_Mode"
F_DIALNORM = "dialnorm"
F_DIALNORM_AVERAGE = "dialnorm_Average"


class ProbeFields:
    """Typed reads over an opened MediaProbePort."""

    def __init__(self, port: MediaProbePort) -> None:
        self.port = port

    def text(self, kind: StreamKind, num: int, field: str) -> str:
        v = self.port.get(kind, num, field)
        return "" if v is None else str(v)

    def optional_text(self, kind: StreamKind, num: int, field: str) -> Optional[str]:
        return self.text(kind, num, field) or None

    def lower_text(self, kind: StreamKind, num: int, field: str) -> Optional[str]:
        v = self.text(kind, num, field)
        return v.lower() if v else None

    def int_(self, kind: StreamKind, num: int, field: str) -> Optional[int]:
        return fp.parse_int(self.text(kind, num, field))

    def byte(self, kind: StreamKind, num: int, field: str) -> Optional[int]:
        return fp.parse_byte(self.text(kind, num, field))

    def float_(self, kind: StreamKind, num: int, field: str) -> Optional[float]:
        return fp.parse_float(self.text(kind, num, field))

    def tristate(self, kind: StreamKind, num: int, field: str) -> Optional[int]:
        return fp.parse_tristate(self.text(kind, num, field))

    def max_from_list(self, kind: StreamKind, num: int, field: str) -> Optional[int]:
        return fp.max_from_list(self.text(kind, num, field))

    def kbps(self, kind: StreamKind, num: int, field: str = F_BITRATE) -> Optional[int]:
        return fp.to_kbps(self.max_from_list(kind, num, field))

    def count(self, field: str) -> int:
        return self.int_(StreamKind.general, 0, field) or 0
