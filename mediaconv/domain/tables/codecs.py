# mediaconv/domain/tables/codecs.py
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

# MediaInfo codec / codec-id token -> canonical codec. Keys are lower-case, matched exactly.
CODEC_IDS: Mapping[str, str] = MappingProxyType({
    "161": "wmav2",
    "162": "wmapro",
    "2": "adpcm_ms",
    "55": "mp3",
    "a_aac": "aac",
    "a_aac/mpeg4/lc/sbr": "aac",
    "a_ac3": "ac3",
    "a_flac": "flac",
    "aac lc": "aac",
    "aac lc-sbr": "aac",
    "aac lc-sbr-ps": "aac",
    "avc": "h264",
    "avc1": "h264",
    "div3": "msmpeg4",
    "divx": "mpeg4",
    "dts": "dca",
    "dts-hd": "dca",
    "dx50": "mpeg4",
    "flv1": "flv",
    "mp42": "msmpeg4v2",
    "mp43": "msmpeg4",
    "mpa1l2": "mp2",
    "mpa1l3": "mp3",
    "mpa2.5l3": "mp3",
    "mpa2l3": "mp3",
    "mpeg-1v": "mpeg1video",
    "mpeg-2v": "mpeg2video",
    "mpeg-4v": "mpeg4",
    "mpg4": "msmpeg4v1",
    "on2 vp6": "vp6f",
    "sorenson h263": "flv",
    "v_mpeg2": "mpeg2",
    "v_mpeg4/iso/asp": "mpeg4",
    "v_mpeg4/iso/avc": "h264",
    "vc-1": "vc1",
    "xvid": "mpeg4",
})


def translate_codec(codec: Optional[str]) -> str:
    """Canonical codec for a vendor token; unknown tokens pass through lower-cased."""
    c = (codec or "").lower()
    return CODEC_IDS.get(c, c)
