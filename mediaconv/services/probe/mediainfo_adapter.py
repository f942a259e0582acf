# mediaconv/services/probe/mediainfo_adapter.py
from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

from pymediainfo import MediaInfo

from mediaconv.common.logging import get_logger
from mediaconv.common.probe.field_parsers import parse_float
from mediaconv.domain.enums.stream_kind import StreamKind
from mediaconv.domain.ports.probe import MediaProbePort
from mediaconv.domain.tables.codecs import CODEC_IDS
from mediaconv.domain.tables.languages import code3_from_code2, language_from_code3
from mediaconv.services.probe.errors import MediaInfoError

logger = get_logger(__name__)

# legacy MediaInfo parameter -> key in the JSON report
KEY_ALIASES = {
    "BitRate": "OverallBitRate",
    "Channel(s)": "Channels",
    "Channel(s)_Original": "Channels_Original",
}

# reported in seconds by the JSON output, in milliseconds by the legacy API
MILLISECOND_FIELDS = frozenset({"Duration"})

# "Version 2.5" -> "2.5", "Layer 3" -> "3"
_TRAILING_NUMBER = re.compile(r"(\d+(?:\.\d+)?)\s*$")


def _trailing_number(text: str) -> str:
    m = _TRAILING_NUMBER.search(text)
    return m.group(1) if m else ""


class PyMediaInfoAdapter(MediaProbePort):
    """
    Infrastructure adapter implementing MediaProbePort on top of pymediainfo.

    libmediainfo's JSON report is parsed once per open(); get() then answers
    legacy parameter lookups ("Language/String3", "Channel(s)", "Format_Profile"
    as "Main@L3.1") from it. Missing fields come back as "".
    """

    def __init__(
        self,
        library_file: Optional[str] = None,
        parse_speed: float = 0.5,
        full: bool = True,
    ) -> None:
        if not MediaInfo.can_parse(library_file):
            raise MediaInfoError("libmediainfo could not be loaded", detail=library_file)
        self.library_file = library_file
        self.parse_speed = parse_speed
        self.full = full
        self._tracks: Dict[str, List[Dict[str, Any]]] = {}

    # ---- Port API -------------------------------------------------------------
    def open(self, path: str | Path) -> bool:
        self._tracks = {}
        try:
            raw = MediaInfo.parse(
                str(path),
                library_file=self.library_file,
                parse_speed=self.parse_speed,
                full=self.full,
                output="JSON",
            )
            data = json.loads(raw or "{}")
        except (OSError, RuntimeError, ValueError) as e:
            logger.info("MediaInfo failed on %s: %s", path, e)
            return False

        media = (data or {}).get("media") or {}
        for track in media.get("track") or []:
            self._tracks.setdefault(str(track.get("@type", "")), []).append(track)
        return bool(self._tracks.get(StreamKind.general.value))

    def get(self, kind: StreamKind, index: int, field: str) -> str:
        tracks = self._tracks.get(StreamKind(kind).value) or []
        if not 0 <= index < len(tracks):
            return ""
        return self._lookup(tracks[index], field)

    def close(self) -> None:
        self._tracks = {}

    # ---- Key mapping ----------------------------------------------------------
    @staticmethod
    def _raw(track: Dict[str, Any], key: str) -> str:
        for candidate in (key, key.replace("/", "_"), KEY_ALIASES.get(key)):
            if not candidate:
                continue
            v = track.get(candidate)
            if v is None:
                v = (track.get("extra") or {}).get(candidate)
            if v is not None and not isinstance(v, (dict, list)):
                return str(v)
        return ""

    def _lookup(self, track: Dict[str, Any], field: str) -> str:
        if field == "Codec":
            return self._raw(track, field) or self._legacy_codec(track)

        v = self._raw(track, field)
        if v:
            if field in MILLISECOND_FIELDS:
                secs = parse_float(v)
                return str(int(round(secs * 1000))) if secs is not None else v
            if field == "Format_Profile" and "@" not in v:
                level = self._raw(track, "Format_Level")
                return f"{v}@L{level}" if level else v
            return v

        if field in ("Language/String3", "Language/String1"):
            code3 = code3_from_code2(self._raw(track, "Language").split("-")[0])
            if not code3:
                return ""
            return code3 if field == "Language/String3" else language_from_code3(code3)
        return ""

    @classmethod
    def _legacy_codec(cls, track: Dict[str, Any]) -> str:
        """
        Rebuild the legacy "Codec" token from the JSON Format fields:
        MPEG Audio v1 layer 3 -> "MPA1L3", MPEG Video v2 -> "MPEG-2V",
        MPEG-4 Visual -> its FourCC when known ("XVID"), else "MPEG-4V",
        AC-3 -> "AC3".
        """
        fmt = cls._raw(track, "Format")
        low = fmt.lower()
        if low == "mpeg audio":
            version = _trailing_number(cls._raw(track, "Format_Version"))
            layer = _trailing_number(cls._raw(track, "Format_Profile"))
            if version and layer:
                return f"MPA{version}L{layer}"
        elif low == "mpeg video":
            version = _trailing_number(cls._raw(track, "Format_Version"))
            if version:
                return f"MPEG-{version}V"
        elif low == "mpeg-4 visual":
            codec_id = cls._raw(track, "CodecID")
            return codec_id if codec_id.lower() in CODEC_IDS else "MPEG-4V"
        elif low in ("ac-3", "e-ac-3"):
            return fmt.replace("-", "")
        return fmt
