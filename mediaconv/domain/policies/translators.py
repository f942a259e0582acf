# mediaconv/domain/policies/translators.py
"""
Stream translators: one pure function per stream kind, mapping the probe's raw
fields for stream ``num`` onto a canonical Stream record.

Only read-and-normalize happens here. Anything that needs more than one
stream (primary codecs, index renumbering, single-stream defaulting) belongs
to the aggregate deriver.
"""
from __future__ import annotations

import re
from typing import Optional, Tuple

from mediaconv.domain.entities.media import AudioStream, TextStream, VideoStream
from mediaconv.domain.enums.stream_kind import StreamKind
from mediaconv.domain.policies import fields as f
from mediaconv.domain.policies.fields import ProbeFields
from mediaconv.domain.tables.codecs import translate_codec
from mediaconv.domain.tables.containers import subtitle_format
from mediaconv.domain.tables.languages import (
    language_from_code3,
    post_translate_code3,
    post_translate_language,
)

_LEVEL_NUMBER = re.compile(r"\d+")

# rotation in degrees -> orientation code
ORIENTATIONS = {90.0: 9, 180.0: 3, 270.0: 6}

# Format_Profile values that only restate the codec
AUDIO_PROFILE_NOISE = frozenset({"layer 3", "dolby digital", "pro", "layer 2"})

# (Format_Settings, bit depth) -> PCM profile
PCM_PROFILES = {
    ("Little / Signed", 16): "pcm_s16le",
    ("Big / Signed", 16): "pcm_s16be",
    ("Little / Unsigned", 8): "pcm_u8",
}


# ---------------------------------------------------------------------------
# Profile / level
# ---------------------------------------------------------------------------
def translate_profile(codec: Optional[str], profile: str) -> str:
    p = profile.lower()
    if "advanced simple" in p:
        return "asp"
    if codec == "mpeg4" and p == "simple":
        return "sp"
    if p in ("asp", "sp"):
        return p
    if p.startswith("m"):
        return "main"
    if p.startswith("s"):
        return "simple"
    if p.startswith("a"):
        return "advanced"
    return p


def translate_level(level: str) -> str:
    lv = level.replace(".", "").lower()
    if lv.startswith("l"):
        digits = lv[1:]
        n = int(digits) if _LEVEL_NUMBER.fullmatch(digits) else 0
        if n != 0:
            return str(n)
        if lv.startswith("lm"):
            return "medium"
        if lv.startswith("lh"):
            return "high"
        return "low"
    if lv.startswith("m"):
        return "medium"
    if lv.startswith("h"):
        return "high"
    return lv


def split_profile_level(codec: Optional[str], raw: Optional[str]) -> Tuple[Optional[str], Optional[int]]:
    """
    "Main@L3.1" -> ("main", 31). Levels that don't reduce to a number
    ("medium", "high", ...) leave the numeric level unset.
    """
    if not raw:
        return None, None
    low = raw.lower()
    at = low.find("@")
    if at <= 0:
        return translate_profile(codec, low), None
    profile = translate_profile(codec, low[:at])
    level = translate_level(low[at + 1:])
    return profile, (int(level) if level.isdigit() else None)


# ---------------------------------------------------------------------------
# Shared pieces
# ---------------------------------------------------------------------------
def resolve_language(fields: ProbeFields, kind: StreamKind, num: int) -> Tuple[Optional[str], Optional[str]]:
    """Return (language_code, language_name) after both alias passes."""
    code3 = fields.text(kind, num, f.F_LANGUAGE_CODE3)
    code = post_translate_code3(code3) if code3 else None
    name = post_translate_language(language_from_code3(code3, fields.text(kind, num, f.F_LANGUAGE_NAME)))
    return code or None, name or None


def _orientation(rotation: Optional[float]) -> Optional[int]:
    if not rotation:
        return None
    return ORIENTATIONS.get(rotation)


def _nonzero(v):
    return v if v else None


# ---------------------------------------------------------------------------
# Translators
# ---------------------------------------------------------------------------
def translate_video_stream(fields: ProbeFields, num: int) -> VideoStream:
    k = StreamKind.video
    codec = translate_codec(fields.text(k, num, f.F_CODEC)) or None
    width = fields.int_(k, num, f.F_WIDTH)
    code, name = resolve_language(fields, k, num)
    profile, level = split_profile_level(codec, fields.text(k, num, f.F_FORMAT_PROFILE))

    cabac = fields.tristate(k, num, f.F_CABAC)
    scaling = None
    if codec == "h264":
        scaling = 1 if level == 31 and cabac == 0 else 0

    frame_rate = fields.float_(k, num, f.F_FRAME_RATE) or fields.float_(k, num, f.F_FRAME_RATE_ORIGINAL)

    bvop = None
    raw_bvop = fields.text(k, num, f.F_BVOP)
    if raw_bvop and codec != "mpeg1video":
        if raw_bvop == "No":
            bvop = 0
        elif raw_bvop in ("1", "Yes"):
            bvop = 1

    muxing = fields.text(k, num, f.F_MUXING_MODE)

    pa = fields.float_(k, num, f.F_PIXEL_ASPECT) or 1.0
    pa_original = fields.float_(k, num, f.F_PIXEL_ASPECT_ORIGINAL)
    if pa_original is not None:
        pa = pa_original
    par = None
    if pa != 1.0 and width:
        par = f"{int(round(width * pa))}:{width}"

    return VideoStream(
        id=fields.int_(k, num, f.F_UNIQUE_ID),
        codec=codec,
        codec_id=fields.optional_text(k, num, f.F_CODEC_ID),
        title=fields.optional_text(k, num, f.F_TITLE),
        language=name,
        language_code=code,
        bitrate=fields.kbps(k, num),
        index=fields.byte(k, num, f.F_ID),
        default=fields.tristate(k, num, f.F_DEFAULT),
        forced=fields.tristate(k, num, f.F_FORCED),
        width=width,
        height=fields.int_(k, num, f.F_HEIGHT),
        duration=fields.int_(k, num, f.F_DURATION),
        scan_type=fields.lower_text(k, num, f.F_SCAN_TYPE),
        profile=profile,
        level=level,
        frame_rate=frame_rate or None,
        frame_rate_mode=fields.lower_text(k, num, f.F_FRAME_RATE_MODE),
        color_space=fields.lower_text(k, num, f.F_COLOR_SPACE),
        chroma_subsampling=fields.lower_text(k, num, f.F_CHROMA_SUBSAMPLING),
        bit_depth=_nonzero(fields.byte(k, num, f.F_BIT_DEPTH)),
        ref_frames=fields.byte(k, num, f.F_REF_FRAMES),
        cabac=cabac,
        qpel=fields.tristate(k, num, f.F_QPEL),
        gmc=fields.optional_text(k, num, f.F_GMC),
        bvop=bvop,
        orientation=_orientation(fields.float_(k, num, f.F_ROTATION)),
        pixel_aspect=pa,
        pixel_aspect_ratio=par,
        has_scaling_matrix=scaling,
        header_stripping=1 if "strip" in muxing.lower() else None,
    )


def _audio_profile(raw: str, codec: Optional[str], settings: str, bit_depth: Optional[int]) -> Optional[str]:
    profile = None
    low = raw.lower()
    if low and low not in AUDIO_PROFILE_NOISE:
        profile = low
    if low.startswith("ma"):
        profile = "ma"
    if codec == "pcm" and settings:
        profile = PCM_PROFILES.get((settings, bit_depth), profile)
    return profile


def translate_audio_stream(fields: ProbeFields, num: int) -> AudioStream:
    k = StreamKind.audio
    codec = translate_codec(fields.text(k, num, f.F_CODEC)) or None
    code, name = resolve_language(fields, k, num)
    bit_depth = _nonzero(fields.byte(k, num, f.F_BIT_DEPTH))

    channels = fields.max_from_list(k, num, f.F_CHANNELS_ORIGINAL) or fields.max_from_list(k, num, f.F_CHANNELS)
    dialnorm = fields.text(k, num, f.F_DIALNORM_AVERAGE) or fields.text(k, num, f.F_DIALNORM)

    return AudioStream(
        id=fields.int_(k, num, f.F_UNIQUE_ID),
        codec=codec,
        codec_id=fields.optional_text(k, num, f.F_CODEC_ID),
        title=fields.optional_text(k, num, f.F_TITLE),
        language=name,
        language_code=code,
        bitrate=fields.kbps(k, num),
        index=fields.byte(k, num, f.F_ID),
        default=fields.tristate(k, num, f.F_DEFAULT),
        forced=fields.tristate(k, num, f.F_FORCED),
        duration=_nonzero(fields.int_(k, num, f.F_DURATION)),
        sampling_rate=fields.max_from_list(k, num, f.F_SAMPLING_RATE),
        channels=channels,
        profile=_audio_profile(
            fields.text(k, num, f.F_FORMAT_PROFILE),
            codec,
            fields.text(k, num, f.F_FORMAT_SETTINGS),
            bit_depth,
        ),
        bitrate_mode=fields.lower_text(k, num, f.F_BITRATE_MODE),
        dialog_norm=dialnorm or None,
        bit_depth=bit_depth,
    )


def translate_text_stream(fields: ProbeFields, num: int) -> TextStream:
    k = StreamKind.text
    code, name = resolve_language(fields, k, num)
    codec_id = fields.optional_text(k, num, f.F_CODEC_ID)
    fmt = subtitle_format(codec_id, fields.text(k, num, f.F_FORMAT))
    return TextStream(
        id=fields.int_(k, num, f.F_UNIQUE_ID),
        codec=fmt,
        codec_id=codec_id,
        title=fields.optional_text(k, num, f.F_TITLE) or fields.optional_text(k, num, f.F_SUBTITLE),
        language=name,
        language_code=code,
        index=fields.byte(k, num, f.F_ID),
        default=fields.tristate(k, num, f.F_DEFAULT),
        forced=fields.tristate(k, num, f.F_FORCED),
        format=fmt,
    )
