# ABOUTME: Fixed-size thread pool that hashes many files concurrently.
# ABOUTME: Fans paths out over a closable task queue and fans results back in.

import logging
import os
import queue
import threading
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from hashpool.core.digest import DigestError, FileResult, compute_file_result

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 4

_CLOSED = object()


def default_worker_count() -> int:
    """Number of logical CPUs, capped at DEFAULT_WORKERS."""
    return min(os.cpu_count() or 1, DEFAULT_WORKERS)


@dataclass(frozen=True)
class PoolConfig:
    """Immutable worker pool settings, resolved once before processing."""

    workers: int

    def __post_init__(self) -> None:
        if self.workers < 1:
            raise ValueError(f"workers must be positive, got {self.workers}")

    @classmethod
    def resolve(cls, requested: int | None = None) -> "PoolConfig":
        """Build a config, falling back to the default for None, 0, or negatives."""
        if requested is not None and requested > 0:
            return cls(workers=requested)
        return cls(workers=default_worker_count())


class ClosableQueue:
    """Bounded FIFO that a single writer closes once it has nothing more to send.

    Iterating yields items until the queue is closed and drained. Closure is
    visible to every consumer, so any number of threads can iterate the same
    queue and all of them stop.
    """

    def __init__(self, capacity: int = 0) -> None:
        # One extra slot so close() never blocks on a full queue.
        self._queue: queue.Queue[Any] = queue.Queue(maxsize=capacity + 1 if capacity else 0)
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def put(self, item: Any) -> None:
        with self._lock:
            if self._closed:
                raise ValueError("put() on a closed queue")
        self._queue.put(item)

    def close(self) -> None:
        """Signal that no more items will be put. Idempotent."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
        self._queue.put(_CLOSED)

    def __iter__(self) -> Iterator[Any]:
        while True:
            item = self._queue.get()
            if item is _CLOSED:
                # Leave the marker in place for the other consumers.
                self._queue.put(_CLOSED)
                return
            yield item


class FileProcessor:
    """Hashes batches of files with a fixed number of worker threads.

    Results come back in completion order, not input order. A failure on one
    file is captured in that file's FileResult and never affects the others.
    """

    def __init__(self, config: PoolConfig | int | None = None) -> None:
        if not isinstance(config, PoolConfig):
            config = PoolConfig.resolve(config)
        self.config = config

    @property
    def workers(self) -> int:
        return self.config.workers

    def process(
        self,
        paths: Iterable[str | Path],
        on_result: Callable[[FileResult], None] | None = None,
    ) -> list[FileResult]:
        """Hash every path and return one FileResult per path.

        Args:
            paths: Files to hash. Each path is processed exactly once.
            on_result: Optional callback invoked on the calling thread as
                each result is collected.

        Returns:
            All results, in the order they completed.
        """
        tasks = [os.fspath(p) for p in paths]
        if not tasks:
            return []

        task_queue = ClosableQueue(len(tasks))
        result_queue = ClosableQueue(len(tasks))

        logger.debug("Starting %d workers for %d files", self.workers, len(tasks))
        workers = [
            threading.Thread(
                target=self._work,
                args=(task_queue, result_queue),
                name=f"hashpool-worker-{n}",
                daemon=True,
            )
            for n in range(self.workers)
        ]
        for worker in workers:
            worker.start()

        dispatcher = threading.Thread(
            target=self._dispatch,
            args=(tasks, task_queue),
            name="hashpool-dispatch",
            daemon=True,
        )
        supervisor = threading.Thread(
            target=self._supervise,
            args=(workers, result_queue),
            name="hashpool-supervise",
            daemon=True,
        )
        dispatcher.start()
        supervisor.start()

        results: list[FileResult] = []
        for result in result_queue:
            results.append(result)
            if on_result is not None:
                on_result(result)

        dispatcher.join()
        supervisor.join()
        logger.debug("Pool drained: %d results", len(results))
        return results

    @staticmethod
    def _dispatch(tasks: list[str], task_queue: ClosableQueue) -> None:
        for path in tasks:
            task_queue.put(path)
        task_queue.close()

    @staticmethod
    def _work(task_queue: ClosableQueue, result_queue: ClosableQueue) -> None:
        for path in task_queue:
            try:
                result = compute_file_result(path)
            except Exception as exc:
                logger.exception("Unexpected failure while hashing %s", path)
                error = DigestError(path, exc)
                error.__cause__ = exc
                result = FileResult(path=path, error=error, duration=0.0)
            result_queue.put(result)

    @staticmethod
    def _supervise(workers: list[threading.Thread], result_queue: ClosableQueue) -> None:
        for worker in workers:
            worker.join()
        result_queue.close()


def process_files(
    paths: Iterable[str | Path],
    config: PoolConfig | int | None = None,
    *,
    on_result: Callable[[FileResult], None] | None = None,
) -> list[FileResult]:
    """Hash files concurrently with a fixed-size worker pool.

    Args:
        paths: Files to hash.
        config: A PoolConfig, a requested worker count, or None for the
            default. Zero and negative counts also mean the default.
        on_result: Optional per-result callback, e.g. to drive a progress bar.

    Returns:
        One FileResult per input path, in completion order.
    """
    return FileProcessor(config).process(paths, on_result=on_result)
