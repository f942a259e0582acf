from __future__ import annotations
from pathlib import Path
from typing import Callable, Protocol
from mediaconv.domain.enums.stream_kind import StreamKind


class MediaProbePort(Protocol):
    """Raw probing capability (MediaInfo-style). Every value comes back as untyped text."""
    def open(self, path: str | Path) -> bool: ...
    def get(self, kind: StreamKind, index: int, field: str) -> str: ...
    def close(self) -> None: ...


ProbeFactory = Callable[[], MediaProbePort]
