"""ISO base-media (MP4/MOV) box walking for pseudo-streaming detection."""

from __future__ import annotations

import struct
from dataclasses import replace
from typing import BinaryIO, Collection, Optional, Tuple

from mediaconv.common.logging import get_logger
from mediaconv.domain.dataclasses.probe import StreamingFlags
from mediaconv.domain.entities.media import MediaDescriptor

logger = get_logger(__name__)

HEADER = struct.Struct(">I4s")
SIZE = struct.Struct(">I")

STREAMING_CONTAINERS = ("mp4", "mov")

# moov -> ... -> co64: a 64-bit chunk offset table in the first track's sample table
CO64_PATH = (b"trak", b"mdia", b"minf", b"stbl", b"co64")


def has_streaming_layout(container: Optional[str], containers: Collection[str] = STREAMING_CONTAINERS) -> bool:
    return bool(container) and container in containers


def find_box(buffer: bytes, name: bytes, start: int, bound: int) -> Optional[Tuple[int, int]]:
    """
    Scan sibling boxes in buffer[start:bound] for `name`.

    Returns (payload_start, box_end) of the first match, or None when the box is
    missing or a header is truncated or sized out of bounds.
    """
    bound = min(bound, len(buffer))
    if start + 8 >= bound:
        return None
    while start < bound:
        if start + HEADER.size > bound:
            return None
        size, box_type = HEADER.unpack_from(buffer, start)
        if size < HEADER.size or start + size > bound:
            return None
        if box_type == name:
            return start + HEADER.size, start + size
        start += size
    return None


def detect_streaming(fh: BinaryIO) -> StreamingFlags:
    """
    Look for a `moov` box right after `ftyp` (optionally behind one `free` box).
    A moov found there means the file is optimized for progressive playback.
    Malformed input stops the walk and reports whatever was established.
    """
    head = fh.read(SIZE.size)
    if len(head) < SIZE.size:
        return StreamingFlags()
    (first_size,) = SIZE.unpack(head)

    fh.seek(first_size, 0)
    header = fh.read(HEADER.size)
    if len(header) < HEADER.size:
        return StreamingFlags()
    size, box_type = HEADER.unpack(header)

    if box_type == b"free":
        if size < HEADER.size:
            return StreamingFlags()
        fh.seek(size - HEADER.size, 1)
        header = fh.read(HEADER.size)
        if len(header) < HEADER.size:
            return StreamingFlags()
        size, box_type = HEADER.unpack(header)

    if box_type != b"moov":
        return StreamingFlags()

    buffer = fh.read(max(0, size - HEADER.size))
    pos, bound = 0, len(buffer)
    for name in CO64_PATH:
        found = find_box(buffer, name, pos, bound)
        if found is None:
            logger.debug("box walk stopped looking for %s", name.decode("ascii"))
            return StreamingFlags(optimized_for_streaming=True)
        pos, bound = found
    return StreamingFlags(optimized_for_streaming=True, has_64bit_offsets=True)


def apply_streaming(descriptor: MediaDescriptor, flags: StreamingFlags) -> MediaDescriptor:
    """Return a copy of descriptor (and its part) carrying the streaming flags."""
    parts = tuple(
        replace(
            p,
            optimized_for_streaming=flags.optimized_for_streaming,
            has_64bit_offsets=flags.has_64bit_offsets,
        )
        for p in descriptor.parts
    )
    return replace(
        descriptor,
        optimized_for_streaming=flags.optimized_for_streaming,
        has_64bit_offsets=flags.has_64bit_offsets,
        parts=parts,
    )
