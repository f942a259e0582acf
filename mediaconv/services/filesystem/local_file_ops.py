from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from mediaconv.domain.ports.files import ReadableFilePort


class LocalFile(ReadableFilePort):
    """
    Local filesystem implementation for ReadableFilePort.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def open_read(self) -> BinaryIO:
        if not self.path.is_file():
            raise FileNotFoundError(f"File not found: {self.path}")
        return self.path.open("rb")

    def exists(self) -> bool:
        return self.path.is_file()
