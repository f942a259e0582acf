from __future__ import annotations
from enum import StrEnum


class StreamKind(StrEnum):
    general = "General"
    video = "Video"
    audio = "Audio"
    text = "Text"
    menu = "Menu"

    @property
    def stream_type(self) -> int:
        """Numeric stream type used by catalog consumers (1 video, 2 audio, 3 text)."""
        return {StreamKind.video: 1, StreamKind.audio: 2, StreamKind.text: 3}.get(self, 0)
