from __future__ import annotations

import logging
import time
import threading
from concurrent.futures import Future, TimeoutError as FutureTimeout
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

R = TypeVar("R")

log = logging.getLogger(__name__)


@dataclass
class WorkerStats:
    start_ts: float
    tasks_submitted: int = 0
    tasks_completed: int = 0
    tasks_failed: int = 0
    tasks_timed_out: int = 0

    @property
    def uptime_sec(self) -> float:
        return time.time() - self.start_ts

    @property
    def in_flight(self) -> int:
        done = self.tasks_completed + self.tasks_failed + self.tasks_timed_out
        return max(0, self.tasks_submitted - done)


class SingleSlotWorker(Generic[R]):
    """
    Runs one unit of work at a time on a daemon thread and lets the caller
    bound how long it waits.

    Features
    --------
    - run(fn, *args, timeout=...) -> R, raises TimeoutError past the ceiling
    - Stop event handed to tasks for cooperative cancellation
    - abandon(): give up on a hung task without joining its thread
    - Stats snapshot, context manager support

    Notes
    -----
    - Python threads can't be pre-empted. After a timeout the thread may keep
      running; the worker is unusable from then on and must be replaced.
    - Task threads are daemons, so an abandoned task never holds up
      interpreter exit.
    """

    def __init__(self, name: str = "probe") -> None:
        self._name = name
        self._stop = threading.Event()
        self._stats = WorkerStats(start_ts=time.time())
        self._closed = False
        self._lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None
        self._future: Optional[Future[R]] = None

    # -------------------------
    # Lifecycle
    # -------------------------
    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting work; with `wait`, join the current task. Safe to call multiple times."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._stop.set()
            thread = self._thread
        if wait and thread is not None:
            thread.join()

    def abandon(self) -> None:
        """Signal the running task to stop and walk away from its thread."""
        self.shutdown(wait=False)

    def __enter__(self) -> "SingleSlotWorker[R]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown(wait=True)

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def busy(self) -> bool:
        return self._future is not None and not self._future.done()

    @property
    def stop_event(self) -> threading.Event:
        """A cooperative stop flag tasks should poll between steps."""
        return self._stop

    def stats(self) -> WorkerStats:
        """Return a *snapshot* of current stats."""
        with self._lock:
            return WorkerStats(
                start_ts=self._stats.start_ts,
                tasks_submitted=self._stats.tasks_submitted,
                tasks_completed=self._stats.tasks_completed,
                tasks_failed=self._stats.tasks_failed,
                tasks_timed_out=self._stats.tasks_timed_out,
            )

    # -------------------------
    # Submission
    # -------------------------
    def submit(self, fn: Callable[..., R], /, *args, **kwargs) -> Future[R]:
        fut: Future[R] = Future()

        def _target() -> None:
            if not fut.set_running_or_notify_cancel():
                return
            try:
                result = fn(*args, **kwargs)
            except BaseException as e:
                with self._lock:
                    self._stats.tasks_failed += 1
                fut.set_exception(e)
            else:
                with self._lock:
                    self._stats.tasks_completed += 1
                fut.set_result(result)

        with self._lock:
            if self._closed:
                raise RuntimeError(f"{self._name}: submit() after shutdown")
            if self._future is not None and not self._future.done():
                raise RuntimeError(f"{self._name}: slot already busy")
            self._stats.tasks_submitted += 1
            self._future = fut
            self._thread = threading.Thread(target=_target, name=self._name, daemon=True)
            self._thread.start()
        return fut

    def run(self, fn: Callable[..., R], /, *args, timeout: Optional[float] = None, **kwargs) -> R:
        """
        Submit fn and block up to `timeout` seconds for its result.
        Exceptions raised by fn propagate; a timeout raises TimeoutError and
        leaves the task running (call abandon()).
        """
        fut = self.submit(fn, *args, **kwargs)
        try:
            return fut.result(timeout=timeout)
        except FutureTimeout:
            with self._lock:
                self._stats.tasks_timed_out += 1
            log.warning("%s task exceeded %.1fs", self._name, timeout or 0.0)
            raise TimeoutError(f"{self._name}: task exceeded {timeout}s") from None
