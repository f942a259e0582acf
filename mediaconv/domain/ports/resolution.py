from __future__ import annotations
from typing import Optional, Protocol


class ResolutionPort(Protocol):
    """Maps frame dimensions onto a catalog resolution bucket (e.g. "1080p")."""
    def __call__(self, width: int, height: int) -> Optional[str]: ...
