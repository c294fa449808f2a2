"""Executor configuration for non-blocking splits."""

import os
import threading
from concurrent.futures import ThreadPoolExecutor

# Environment variable to override the shared pool's worker count.
SPLIT_WORKERS_ENV = "BUFFER_SPLIT_WORKERS"

_shared_executor: ThreadPoolExecutor | None = None
_shared_lock = threading.Lock()


def get_max_workers() -> int | None:
    """
    Read the worker count from BUFFER_SPLIT_WORKERS.

    Returns None when unset, letting ThreadPoolExecutor pick its default.
    """
    raw = os.environ.get(SPLIT_WORKERS_ENV, "").strip()
    if not raw:
        return None

    try:
        workers = int(raw)
    except ValueError:
        raise ValueError(f"{SPLIT_WORKERS_ENV} must be a positive integer, got {raw!r}") from None
    if workers < 1:
        raise ValueError(f"{SPLIT_WORKERS_ENV} must be a positive integer, got {raw!r}")
    return workers


def get_executor() -> ThreadPoolExecutor:
    """Return the thread pool shared by split calls, creating it on first use."""
    global _shared_executor
    with _shared_lock:
        if _shared_executor is None:
            _shared_executor = ThreadPoolExecutor(
                max_workers=get_max_workers(),
                thread_name_prefix="buffer-split",
            )
        return _shared_executor


def get_write_workers(pieces: int) -> int:
    """
    Number of writer threads for one split call.

    Uses BUFFER_SPLIT_WORKERS when set, otherwise the ThreadPoolExecutor
    default, and never more threads than pieces.
    """
    workers = get_max_workers()
    if workers is None:
        workers = min(32, (os.cpu_count() or 1) + 4)
    return max(1, min(workers, pieces))
