from __future__ import annotations
from typing import BinaryIO, Protocol


class ReadableFilePort(Protocol):
    """Opens a media file for binary reading; the handle must support read() and seek()."""
    def open_read(self) -> BinaryIO: ...
