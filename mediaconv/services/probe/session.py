# mediaconv/services/probe/session.py
from __future__ import annotations

import struct
import threading
from functools import lru_cache
from pathlib import Path
from typing import Collection, Optional

from mediaconv.common.concurrency.single_slot import SingleSlotWorker
from mediaconv.common.logging import get_logger
from mediaconv.common.settings import get_settings
from mediaconv.domain.entities.media import MediaDescriptor
from mediaconv.domain.ports.files import ReadableFilePort
from mediaconv.domain.ports.probe import MediaProbePort, ProbeFactory
from mediaconv.domain.ports.resolution import ResolutionPort
from mediaconv.services.filesystem.local_file_ops import LocalFile
from mediaconv.services.probe.box_walker import apply_streaming, detect_streaming, has_streaming_layout
from mediaconv.services.probe.extractor import MediaExtractor

logger = get_logger(__name__)

# libmediainfo is driven one file at a time per process, whichever session asks
_PROBE_LOCK = threading.Lock()


def _default_factory() -> MediaProbePort:
    from mediaconv.services.probe.mediainfo_adapter import PyMediaInfoAdapter  # default adapter

    cfg = get_settings().probe
    return PyMediaInfoAdapter(
        library_file=cfg.mediainfo_library,
        parse_speed=cfg.parse_speed,
        full=cfg.full_output,
    )


class ProbeSession:
    """
    Owns the one MediaInfo instance and the worker thread that drives it.

    - One probe at a time across the process: a module-wide lock is held
      across the whole operation (extraction *and* the MP4 box walk), shared
      by every session.
    - Each extraction runs on the worker and is bounded by `timeout_sec`.
      On timeout the worker is abandoned, the probe instance is thrown away,
      and both are rebuilt on the next call.
    - The probe is closed after every call, whatever the outcome.
    """

    def __init__(
        self,
        probe_factory: Optional[ProbeFactory] = None,
        *,
        timeout_sec: Optional[float] = None,
        resolution: Optional[ResolutionPort] = None,
        streaming_containers: Optional[Collection[str]] = None,
        matroska_containers: Optional[Collection[str]] = None,
    ) -> None:
        cfg = get_settings().probe
        self._factory: ProbeFactory = probe_factory or _default_factory
        self.timeout_sec = float(timeout_sec if timeout_sec is not None else cfg.timeout_sec)
        self.resolution = resolution
        self.streaming_containers = tuple(streaming_containers or cfg.streaming_containers)
        self.matroska_containers = tuple(matroska_containers or cfg.matroska_containers)

        self._lock = _PROBE_LOCK
        self._worker: Optional[SingleSlotWorker[Optional[MediaDescriptor]]] = None
        self._probe: Optional[MediaProbePort] = None

    # -------------------------
    # Lifecycle
    # -------------------------
    def __enter__(self) -> "ProbeSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()

    def shutdown(self) -> None:
        with self._lock:
            self._discard()

    def _ensure_worker(self) -> SingleSlotWorker[Optional[MediaDescriptor]]:
        if self._worker is None or self._worker.closed:
            self._worker = SingleSlotWorker(name="mediainfo")
        return self._worker

    def _ensure_probe(self) -> MediaProbePort:
        if self._probe is None:
            self._probe = self._factory()
        return self._probe

    def _release(self) -> None:
        if self._probe is None:
            return
        try:
            self._probe.close()
        except Exception as e:
            logger.debug("ignoring error closing probe: %s", e)

    def _discard(self) -> None:
        """Drop worker and probe; the next call builds fresh ones."""
        self._release()
        self._probe = None
        if self._worker is not None:
            self._worker.abandon()
            self._worker = None

    # -------------------------
    # Probe
    # -------------------------
    def probe(self, path: str | Path, file: Optional[ReadableFilePort]) -> Optional[MediaDescriptor]:
        """Return the file's MediaDescriptor, or None when no metadata could be obtained."""
        if file is None:
            return None

        with self._lock:
            try:
                port = self._ensure_probe()
            except Exception:
                logger.exception("could not initialise probe for %s", path)
                return None

            worker = self._ensure_worker()
            extractor = MediaExtractor(
                worker.stop_event,
                resolution=self.resolution,
                matroska=self.matroska_containers,
            )
            try:
                descriptor = worker.run(extractor.extract, port, path, timeout=self.timeout_sec)
            except TimeoutError:
                logger.warning("probe of %s exceeded %.0fs; resetting MediaInfo", path, self.timeout_sec)
                self._discard()
                return None
            except Exception:
                logger.exception("probe failed for %s", path)
                return None
            finally:
                self._release()

            if descriptor is None:
                return None
            if not has_streaming_layout(descriptor.container, self.streaming_containers):
                return descriptor
            return self._with_streaming(descriptor, path, file)

    def _with_streaming(
        self, descriptor: MediaDescriptor, path: str | Path, file: ReadableFilePort
    ) -> Optional[MediaDescriptor]:
        try:
            fh = file.open_read()
        except OSError as e:
            logger.error("could not open %s for reading: %s", path, e)
            return None
        with fh:
            try:
                flags = detect_streaming(fh)
            except (OSError, ValueError, struct.error) as e:
                logger.info("box walk aborted for %s: %s", path, e)
                return descriptor
        return apply_streaming(descriptor, flags)


@lru_cache(maxsize=1)
def get_probe_session() -> ProbeSession:
    """Process-wide session; MediaInfo may only run one probe at a time."""
    return ProbeSession()


def probe(path: str | Path, file: Optional[ReadableFilePort]) -> Optional[MediaDescriptor]:
    return get_probe_session().probe(path, file)


def probe_file(path: str | Path) -> Optional[MediaDescriptor]:
    """Probe a file on the local filesystem."""
    return probe(path, LocalFile(path))
