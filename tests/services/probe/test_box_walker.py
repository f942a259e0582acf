import io
import struct

from mediaconv.domain.dataclasses.probe import StreamingFlags
from mediaconv.domain.entities.media import MediaDescriptor, Part
from mediaconv.services.probe.box_walker import (
    apply_streaming,
    detect_streaming,
    find_box,
    has_streaming_layout,
)


def test_moov_to_co64_sets_both_flags(mp4_bytes):
    flags = detect_streaming(io.BytesIO(mp4_bytes()))
    assert flags == StreamingFlags(optimized_for_streaming=True, has_64bit_offsets=True)


def test_moov_without_co64_is_streaming_only(mp4_bytes):
    flags = detect_streaming(io.BytesIO(mp4_bytes(co64=False)))
    assert flags.optimized_for_streaming is True
    assert flags.has_64bit_offsets is False


def test_free_box_before_moov_is_skipped(mp4_bytes):
    flags = detect_streaming(io.BytesIO(mp4_bytes(free=True)))
    assert flags.optimized_for_streaming is True
    assert flags.has_64bit_offsets is True


def test_mdat_before_moov_is_not_streaming(mp4_bytes):
    flags = detect_streaming(io.BytesIO(mp4_bytes(moov_first=False)))
    assert flags == StreamingFlags()


def test_truncated_file_reports_nothing(mp4_box):
    ftyp = mp4_box(b"ftyp", b"isom")
    assert detect_streaming(io.BytesIO(ftyp)) == StreamingFlags()
    assert detect_streaming(io.BytesIO(b"\x00\x00")) == StreamingFlags()
    assert detect_streaming(io.BytesIO(b"")) == StreamingFlags()


def test_corrupted_child_size_stops_walk(mp4_box):
    # mdia claims far more bytes than its parent holds
    bad_mdia = struct.pack(">I4s", 0xFFFFFF00, b"mdia") + b"\x00" * 16
    trak = mp4_box(b"trak", mp4_box(b"tkhd", b"\x00" * 16) + bad_mdia)
    moov = mp4_box(b"moov", trak)
    data = mp4_box(b"ftyp", b"isom") + moov
    flags = detect_streaming(io.BytesIO(data))
    assert flags.optimized_for_streaming is True
    assert flags.has_64bit_offsets is False


def test_zero_sized_sibling_does_not_loop(mp4_box):
    zero = struct.pack(">I4s", 0, b"junk") + b"\x00" * 16
    moov = mp4_box(b"moov", zero + mp4_box(b"trak", b"\x00" * 16))
    data = mp4_box(b"ftyp", b"isom") + moov
    assert detect_streaming(io.BytesIO(data)).has_64bit_offsets is False


def test_moov_larger_than_file_is_bounded_by_bytes_read(mp4_box):
    header = struct.pack(">I4s", 10_000, b"moov")
    data = mp4_box(b"ftyp", b"isom") + header + mp4_box(b"trak", b"\x00" * 4)
    flags = detect_streaming(io.BytesIO(data))
    assert flags.optimized_for_streaming is True
    assert flags.has_64bit_offsets is False


def test_find_box_returns_payload_bounds(mp4_box):
    buf = mp4_box(b"aaaa", b"\x00" * 4) + mp4_box(b"bbbb", b"\x01" * 8)
    assert find_box(buf, b"bbbb", 0, len(buf)) == (20, 28)
    assert find_box(buf, b"cccc", 0, len(buf)) is None
    assert find_box(buf, b"aaaa", 0, 8) is None  # no room for a header plus payload


def test_has_streaming_layout():
    assert has_streaming_layout("mp4")
    assert has_streaming_layout("mov")
    assert not has_streaming_layout("mkv")
    assert not has_streaming_layout(None)
    assert has_streaming_layout("m4v", ("mp4", "m4v"))


def test_apply_streaming_returns_new_descriptor():
    d = MediaDescriptor(container="mp4", parts=(Part(container="mp4"),))
    out = apply_streaming(d, StreamingFlags(optimized_for_streaming=True, has_64bit_offsets=True))
    assert out is not d
    assert out.optimized_for_streaming and out.has_64bit_offsets
    assert out.part.optimized_for_streaming and out.part.has_64bit_offsets
    assert d.optimized_for_streaming is False
