import os
import subprocess
import sys
import threading
import time
from pathlib import Path

import pytest

from mediaconv.common.concurrency.single_slot import SingleSlotWorker

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def test_run_returns_result_and_counts():
    with SingleSlotWorker(name="t") as w:
        assert w.run(lambda a, b: a + b, 2, 3, timeout=5) == 5
        stats = w.stats()
    assert stats.tasks_submitted == 1
    assert stats.in_flight == 0


def test_run_propagates_task_errors():
    def boom():
        raise ValueError("nope")

    with SingleSlotWorker(name="t") as w:
        with pytest.raises(ValueError):
            w.run(boom, timeout=5)


def test_run_times_out_and_abandon_does_not_block():
    release = threading.Event()
    w = SingleSlotWorker(name="t")
    try:
        started = time.monotonic()
        with pytest.raises(TimeoutError):
            w.run(release.wait, 30, timeout=0.1)
        w.abandon()
        assert time.monotonic() - started < 5
        assert w.closed
        assert w.stop_event.is_set()
        assert w.stats().tasks_timed_out == 1
        with pytest.raises(RuntimeError):
            w.submit(lambda: None)
    finally:
        release.set()


def test_second_task_while_busy_is_refused():
    release = threading.Event()
    w = SingleSlotWorker(name="t")
    try:
        fut = w.submit(release.wait, 30)
        assert w.busy
        with pytest.raises(RuntimeError):
            w.submit(lambda: None)
        release.set()
        assert fut.result(timeout=5) is True
        assert w.run(lambda: 7, timeout=5) == 7
    finally:
        release.set()
        w.shutdown()


def test_task_threads_are_daemons():
    seen = {}

    def record():
        seen["daemon"] = threading.current_thread().daemon

    with SingleSlotWorker(name="t") as w:
        w.run(record, timeout=5)
    assert seen["daemon"] is True


def test_abandoned_task_does_not_block_interpreter_exit(tmp_path):
    script = tmp_path / "hang.py"
    script.write_text(
        "import threading\n"
        "from mediaconv.common.concurrency.single_slot import SingleSlotWorker\n"
        "w = SingleSlotWorker(name='stuck')\n"
        "try:\n"
        "    w.run(threading.Event().wait, timeout=0.2)\n"
        "except TimeoutError:\n"
        "    print('timed out')\n"
        "w.abandon()\n"
    )
    done = subprocess.run(
        [sys.executable, str(script)],
        cwd=PROJECT_ROOT,
        env={**os.environ, "PYTHONPATH": str(PROJECT_ROOT)},
        capture_output=True,
        text=True,
        timeout=30,
    )
    assert done.returncode == 0, done.stderr
    assert "timed out" in done.stdout
