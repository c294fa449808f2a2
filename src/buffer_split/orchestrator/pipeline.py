"""Validate, split, name and persist pieces of a buffer."""

import logging
import threading
import time
from collections.abc import Callable, Iterator
from concurrent.futures import Executor, Future
from typing import Any

from buffer_split.errors import InvalidOptionsError
from buffer_split.naming import create_filenames
from buffer_split.options import SplitOptions, check_options
from buffer_split.orchestrator.execution import get_executor, get_write_workers
from buffer_split.orchestrator.write import write_piece
from buffer_split.splitter import split_buffer

logger = logging.getLogger(__name__)

type Pieces = list[bytes]
type Callback = Callable[[BaseException | None, Pieces | None], Any]


def _as_bytes(buffer: Any) -> bytes:
    if isinstance(buffer, bytes):
        return buffer
    if isinstance(buffer, (bytearray, memoryview)):
        return bytes(buffer)
    raise InvalidOptionsError(
        f"Buffer must be bytes-like, got {type(buffer).__name__}"
    )


def _prepare(buffer: Any, raw_options: Any) -> tuple[Pieces, list[str] | None]:
    """Run every step before I/O; filenames is None when no prefix is set."""
    options: SplitOptions = check_options(raw_options)
    data = _as_bytes(buffer)

    logger.info(
        "Starting: mode=%s, size=%d bytes, prefix=%s",
        options.mode,
        len(data),
        options.prefix,
    )

    start = time.perf_counter()
    pieces = split_buffer(data, options.mode)
    logger.info("Split into %d pieces in %.2fs", len(pieces), time.perf_counter() - start)

    if options.prefix is None:
        return pieces, None
    return pieces, create_filenames(len(pieces), options)


def split_sync(buffer: bytes, options: Any) -> Pieces:
    """
    Split a buffer, writing every piece before returning.

    When ``options`` has a prefix, each piece is written in order with
    blocking I/O. The first failure propagates and files already written
    stay on disk.
    """
    pieces, filenames = _prepare(buffer, options)
    if filenames is None:
        return pieces

    start = time.perf_counter()
    for filename, piece in zip(filenames, pieces):
        try:
            write_piece(filename, piece)
        except OSError as exc:
            logger.warning("Write to %s failed: %s", filename, exc)
            raise

    logger.info("Wrote %d files in %.2fs", len(filenames), time.perf_counter() - start)
    return pieces


class _WriteTracker:
    """Resolve the result once all writes succeed or on the first failure."""

    def __init__(self, result: Future, pieces: Pieces):
        self._result = result
        self._pieces = pieces
        self._lock = threading.Lock()
        self._done = 0
        self._errored = False

    def fail(self, exc: BaseException) -> None:
        with self._lock:
            already_failed = self._errored
            self._errored = True
        if already_failed:
            logger.warning("Additional write failure after split failed: %s", exc)
            return
        logger.warning("Split failed: %s", exc)
        self._result.set_exception(exc)

    def succeed(self) -> None:
        with self._lock:
            if self._errored:
                return
            self._done += 1
            if self._done < len(self._pieces):
                return
        logger.info("Wrote %d files", len(self._pieces))
        self._result.set_result(self._pieces)


def _write_worker(
    jobs: Iterator[tuple[str, bytes]],
    jobs_lock: threading.Lock,
    tracker: _WriteTracker,
) -> None:
    """Take writes from the shared job iterator until it runs dry."""
    while True:
        with jobs_lock:
            job = next(jobs, None)
        if job is None:
            return

        filename, piece = job
        try:
            write_piece(filename, piece)
        except Exception as exc:
            tracker.fail(exc)
        else:
            tracker.succeed()


def _start_writes(
    filenames: list[str],
    pieces: Pieces,
    workers: int,
    tracker: _WriteTracker,
) -> None:
    """
    Issue every write on non-daemon threads owned by this call.

    The interpreter joins these threads before exiting, and no executor
    shutdown can refuse them, so every issued write runs to completion.
    """
    jobs = zip(filenames, pieces)
    jobs_lock = threading.Lock()
    for index in range(workers):
        thread = threading.Thread(
            target=_write_worker,
            args=(jobs, jobs_lock, tracker),
            name=f"buffer-split-write-{index}",
            daemon=False,
        )
        try:
            thread.start()
        except RuntimeError as exc:
            # Threads already started still drain the remaining jobs.
            tracker.fail(exc)
            break


def _notify(callback: Callback) -> Callable[[Future], None]:
    def deliver(result: Future) -> None:
        exc = result.exception()
        if exc is not None:
            callback(exc, None)
        else:
            callback(None, result.result())

    return deliver


def split(
    buffer: bytes,
    options: Any,
    callback: Callback | None = None,
    *,
    executor: Executor | None = None,
) -> Future:
    """
    Split a buffer without blocking the caller.

    Validation, splitting and naming run on ``executor`` (the shared pool by
    default), so errors never surface in the caller's stack. With a prefix,
    the writes are issued concurrently on threads owned by this call, so
    they finish even when the executor or the interpreter shuts down first.
    Exactly one outcome is delivered: all pieces once every write succeeds,
    or the first error.

    ``callback(error, pieces)`` receives that outcome once. Without a
    callback, the returned future's ``result()`` re-raises the error.
    """
    if executor is None:
        executor = get_executor()

    result: Future = Future()
    result.set_running_or_notify_cancel()
    if callback is not None:
        result.add_done_callback(_notify(callback))

    def run() -> None:
        try:
            pieces, filenames = _prepare(buffer, options)
            workers = get_write_workers(len(pieces)) if filenames else 0
        except Exception as exc:
            logger.warning("Split failed: %s", exc)
            result.set_exception(exc)
            return

        if filenames is None or not pieces:
            result.set_result(pieces)
            return

        _start_writes(filenames, pieces, workers, _WriteTracker(result, pieces))

    try:
        executor.submit(run)
    except RuntimeError as exc:
        logger.warning("Split failed: %s", exc)
        # Deliver off the caller's thread so the callback never runs inside split().
        threading.Thread(
            target=result.set_exception,
            args=(exc,),
            name="buffer-split-notify",
        ).start()
    return result
