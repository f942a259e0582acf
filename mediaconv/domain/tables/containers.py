# mediaconv/domain/tables/containers.py
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

# MediaInfo General/Format -> canonical container. Substring match, first entry wins.
FILE_CONTAINERS: Mapping[str, str] = MappingProxyType({
    "cdxa/mpeg-ps": "mpeg",
    "divx": "avi",
    "flash video": "flv",
    "mpeg video": "mpeg",
    "mpeg-4": "mp4",
    "mpeg-ps": "mpeg",
    "realmedia": "rm",
    "windows media": "asf",
    "matroska": "mkv",
})

# Text CodecID fragment -> subtitle format. Matched case-insensitively as a substring.
SUBTITLE_FORMATS: Mapping[str, str] = MappingProxyType({
    "c608": "eia-608",
    "c708": "eia-708",
    "s_ass": "ass",
    "s_hdmv/pgs": "pgs",
    "s_ssa": "ssa",
    "s_text/ass": "ass",
    "s_text/ssa": "ssa",
    "s_text/usf": "usf",
    "s_text/utf8": "srt",
    "s_usf": "usf",
    "s_vobsub": "vobsub",
    "subp": "vobsub",
    "s_image/bmp": "bmp",
})

QUICKTIME_CODEC_ID = "qt"


def translate_container(container: Optional[str], codec_id: Optional[str] = None) -> str:
    if codec_id and codec_id.strip().lower() == QUICKTIME_CODEC_ID:
        return "mov"
    c = (container or "").lower()
    for key, value in FILE_CONTAINERS.items():
        if key in c:
            return value
    return c


def subtitle_format(codec_id: Optional[str], fmt: Optional[str]) -> Optional[str]:
    if codec_id:
        cid = codec_id.upper()
        for key, value in SUBTITLE_FORMATS.items():
            if key.upper() in cid:
                return value
    if (fmt or "").upper() == "APPLE TEXT":
        return "ttxt"
    return None
