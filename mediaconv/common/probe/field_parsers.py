# mediaconv/common/probe/field_parsers.py
"""
Parsers for the untyped text MediaInfo hands back.

Every helper is total: unparseable input yields ``None`` and never raises,
so a single bad field can't take down a stream translation.
"""
from __future__ import annotations

from typing import Optional

from mediaconv.common.strings.splitters import slash_to_list


def parse_int(x: Optional[str]) -> Optional[int]:
    # MediaInfo may emit "1234.000" for integral quantities
    try:
        if x is None or str(x).strip() == "":
            return None
        return int(float(str(x).strip()))
    except (TypeError, ValueError, OverflowError):
        return None


def parse_byte(x: Optional[str]) -> Optional[int]:
    """Strict unsigned 8-bit integer; anything else (e.g. "4113 (0x1011)") is None."""
    try:
        if x is None:
            return None
        v = int(str(x).strip())
    except (TypeError, ValueError):
        return None
    return v if 0 <= v <= 255 else None


def parse_float(x: Optional[str]) -> Optional[float]:
    try:
        if x is None or str(x).strip() == "":
            return None
        return float(str(x).strip())
    except (TypeError, ValueError):
        return None


def parse_tristate(x: Optional[str]) -> Optional[int]:
    """"yes" -> 1, any other present value -> 0, absent -> None."""
    if x is None or x == "":
        return None
    return 1 if str(x).strip().lower() == "yes" else 0


def max_from_list(x: Optional[str]) -> Optional[int]:
    """Largest integer in a slash-delimited list ("64000/128000"), None if none parse."""
    best = 0
    for part in slash_to_list(x):
        try:
            v = int(part)
        except ValueError:
            continue
        if v > best:
            best = v
    return best or None


def to_kbps(bps: Optional[int]) -> Optional[int]:
    """bit/s -> kbit/s, rounded half up."""
    if not bps:
        return None
    return (bps + 500) // 1000
