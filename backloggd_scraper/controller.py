from __future__ import annotations

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable

from .errors import ScrapeError
from .models import ScrapeResult, Task


class ControllerStopped(ScrapeError):
    """A task was submitted after the controller was stopped."""


class ThreadPoolController:
    """Runs pipelines on a thread pool and hands back one-shot futures.

    The controller accepts work as soon as it is built. ``stop()`` shuts the
    pool down; submissions after that resolve to a failed result without
    running, until ``start()`` brings up a fresh pool.
    """

    def __init__(self, max_workers: int = 2) -> None:
        self._max_workers = max(1, max_workers)
        self._lock = threading.Lock()
        self._executor = self._new_executor()
        self._running = True

    def start(self) -> None:
        with self._lock:
            if not self._running:
                self._executor = self._new_executor()
                self._running = True

    def stop(self, wait: bool = True) -> None:
        with self._lock:
            self._running = False
            executor = self._executor
        executor.shutdown(wait=wait, cancel_futures=False)

    def __enter__(self) -> "ThreadPoolController":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop(wait=True)

    def submit(self, fn: Callable[[Task], ScrapeResult], task: Task) -> Future:
        """Schedule ``fn(task)``; the returned future resolves to its ScrapeResult."""
        with self._lock:
            if not self._running:
                future: Future = Future()
                future.set_result(self._stopped_result(task))
                return future
            return self._executor.submit(fn, task)

    @property
    def running(self) -> bool:
        return self._running

    def _new_executor(self) -> ThreadPoolExecutor:
        return ThreadPoolExecutor(max_workers=self._max_workers, thread_name_prefix="pipeline")

    @staticmethod
    def _stopped_result(task: Task) -> ScrapeResult:
        return ScrapeResult(
            task_id=task.task_id,
            page=task.page,
            url=task.url,
            success=False,
            latency_ms=0,
            data=None,
            error=ControllerStopped(f"controller stopped before {task.page} task {task.task_id} ran"),
        )
