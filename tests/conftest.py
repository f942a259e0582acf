# tests/conftest.py
from __future__ import annotations

import struct
from typing import Any, Dict, Iterable, List, Optional

import pytest

from mediaconv.common import settings as settings_mod
from mediaconv.domain.enums.stream_kind import StreamKind


class FakeProbe:
    """Dict-backed MediaProbePort: one dict of raw fields per track."""

    def __init__(
        self,
        general: Optional[Dict[str, Any]] = None,
        video: Iterable[Dict[str, Any]] = (),
        audio: Iterable[Dict[str, Any]] = (),
        text: Iterable[Dict[str, Any]] = (),
        *,
        opens: bool = True,
    ) -> None:
        video, audio, text = list(video), list(audio), list(text)
        general = dict(general or {})
        general.setdefault("VideoCount", str(len(video)))
        general.setdefault("AudioCount", str(len(audio)))
        general.setdefault("TextCount", str(len(text)))
        self.tracks: Dict[StreamKind, List[Dict[str, Any]]] = {
            StreamKind.general: [general],
            StreamKind.video: video,
            StreamKind.audio: audio,
            StreamKind.text: text,
        }
        self.opens = opens
        self.opened: List[str] = []
        self.closed = 0

    def open(self, path) -> bool:
        self.opened.append(str(path))
        return self.opens

    def get(self, kind: StreamKind, index: int, field: str) -> str:
        tracks = self.tracks.get(kind) or []
        if index >= len(tracks):
            return ""
        return str(tracks[index].get(field, ""))

    def close(self) -> None:
        self.closed += 1


def box(box_type: bytes, payload: bytes = b"") -> bytes:
    return struct.pack(">I4s", 8 + len(payload), box_type) + payload


def build_mp4(*, co64: bool = True, free: bool = False, moov_first: bool = True) -> bytes:
    """Minimal ftyp/moov/mdat layout with a single track."""
    chunk_table = box(b"co64" if co64 else b"stco", b"\x00" * 8)
    stbl = box(b"stbl", box(b"stsd", b"\x00" * 8) + chunk_table)
    minf = box(b"minf", box(b"vmhd", b"\x00" * 12) + stbl)
    mdia = box(b"mdia", box(b"mdhd", b"\x00" * 24) + minf)
    trak = box(b"trak", box(b"tkhd", b"\x00" * 84) + mdia)
    moov = box(b"moov", box(b"mvhd", b"\x00" * 100) + trak)
    ftyp = box(b"ftyp", b"isom\x00\x00\x02\x00isomiso2mp41")
    mdat = box(b"mdat", b"\x00" * 32)
    lead = box(b"free", b"\x00" * 20) if free else b""
    if moov_first:
        return ftyp + lead + moov + mdat
    return ftyp + lead + mdat + moov


@pytest.fixture
def fake_probe():
    return FakeProbe


@pytest.fixture
def mp4_bytes():
    return build_mp4


@pytest.fixture
def mp4_box():
    return box


@pytest.fixture(autouse=True)
def _fresh_settings():
    settings_mod.get_settings.cache_clear()
    yield
    settings_mod.get_settings.cache_clear()
