from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class ProbeCancelled(RuntimeError):
    """Raised inside the worker when the session has given up on the current probe."""


@dataclass(frozen=True)
class MediaInfoError(RuntimeError):
    """Adapter-level error: the MediaInfo library is missing or unusable."""
    message: str
    detail: Optional[str] = None

    def __str__(self) -> str:
        return self.message if not self.detail else f"{self.message}: {self.detail}"
