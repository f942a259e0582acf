# mediaconv/services/probe/extractor.py
from __future__ import annotations

import threading
from pathlib import Path
from typing import Callable, Collection, List, Optional, TypeVar

from mediaconv.common.logging import get_logger
from mediaconv.domain.dataclasses.probe import GeneralFacts
from mediaconv.domain.entities.media import MediaDescriptor, Stream
from mediaconv.domain.enums.stream_kind import StreamKind
from mediaconv.domain.policies import fields as f
from mediaconv.domain.policies.aggregate import MATROSKA_CONTAINERS, derive_descriptor
from mediaconv.domain.policies.fields import ProbeFields
from mediaconv.domain.policies.translators import (
    translate_audio_stream,
    translate_text_stream,
    translate_video_stream,
)
from mediaconv.domain.ports.probe import MediaProbePort
from mediaconv.domain.ports.resolution import ResolutionPort
from mediaconv.domain.tables.containers import translate_container
from mediaconv.services.probe.errors import ProbeCancelled

logger = get_logger(__name__)

S = TypeVar("S", bound=Stream)


def read_general(fields: ProbeFields) -> GeneralFacts:
    g = StreamKind.general
    return GeneralFacts(
        container=translate_container(fields.text(g, 0, f.F_FORMAT), fields.text(g, 0, f.F_CODEC_ID)) or None,
        duration=fields.int_(g, 0, f.F_DURATION) or 0,
        size=fields.int_(g, 0, f.F_FILE_SIZE),
        bitrate=fields.kbps(g, 0),
        menu_count=fields.count(f.F_MENU_COUNT),
        video_count=fields.count(f.F_VIDEO_COUNT),
        audio_count=fields.count(f.F_AUDIO_COUNT),
        text_count=fields.count(f.F_TEXT_COUNT),
    )


class MediaExtractor:
    """
    One extraction pass against an already-constructed probe.
    Runs on the session's worker thread; polls `stop_event` between streams so a
    timed-out probe winds down at the next opportunity.
    """

    def __init__(
        self,
        stop_event: Optional[threading.Event] = None,
        *,
        resolution: Optional[ResolutionPort] = None,
        matroska: Collection[str] = MATROSKA_CONTAINERS,
    ) -> None:
        self.stop_event = stop_event or threading.Event()
        self.resolution = resolution
        self.matroska = matroska

    def _check(self) -> None:
        if self.stop_event.is_set():
            raise ProbeCancelled("probe cancelled")

    def _translate_all(
        self,
        label: str,
        count: int,
        translate: Callable[[ProbeFields, int], S],
        fields: ProbeFields,
        path: str,
    ) -> List[S]:
        out: List[S] = []
        for num in range(count):
            self._check()
            try:
                out.append(translate(fields, num))
            except Exception:
                # one bad track shouldn't cost us the rest of the file
                logger.exception("Error parsing %s stream %d: %s", label, num, path)
        return out

    def extract(self, port: MediaProbePort, path: str | Path) -> Optional[MediaDescriptor]:
        """Return the descriptor, or None when the probe can't open the file."""
        self._check()
        if not port.open(path):
            logger.info("probe could not open %s", path)
            return None

        fields = ProbeFields(port)
        general = read_general(fields)
        p = str(path)

        videos = self._translate_all("video", general.video_count, translate_video_stream, fields, p)
        audios = self._translate_all("audio", general.audio_count, translate_audio_stream, fields, p)
        texts = self._translate_all("text", general.text_count, translate_text_stream, fields, p)
        self._check()

        return derive_descriptor(
            general,
            videos,
            audios,
            texts,
            resolution=self.resolution,
            matroska=self.matroska,
        )
