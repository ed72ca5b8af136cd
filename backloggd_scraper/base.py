from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import Any

from loguru import logger

from .errors import ScrapeError
from .fetchers import DocumentFetcher
from .models import ScrapeResult, Task


class BaseScraper(ABC):
    """Abstract base class for one fetch -> parse pipeline.

    - ``run`` never raises a ScrapeError; it is reported on the result instead.
    - Any other exception is a bug and propagates to the caller.
    - Each scraper owns its fetcher; scrapers are not shared between tasks.
    """

    def __init__(self, fetcher: DocumentFetcher) -> None:
        self._fetcher = fetcher

    def run(self, task: Task) -> ScrapeResult:
        start_ms = self._now_ms()

        try:
            self.validate(task)
            markup = self.fetch(task)
            data = self.parse(markup)
        except ScrapeError as exc:
            latency_ms = self._now_ms() - start_ms
            logger.warning("{} pipeline failed for {} after {}ms: {}", task.page, task.url, latency_ms, exc)
            return ScrapeResult(
                task_id=task.task_id,
                page=task.page,
                url=task.url,
                success=False,
                latency_ms=latency_ms,
                data=None,
                error=exc,
            )

        latency_ms = self._now_ms() - start_ms
        logger.debug("{} pipeline for {} finished in {}ms", task.page, task.url, latency_ms)
        return ScrapeResult(
            task_id=task.task_id,
            page=task.page,
            url=task.url,
            success=True,
            latency_ms=latency_ms,
            data=data,
        )

    def validate(self, task: Task) -> None:
        if not task.url:
            raise ValueError("task.url is required")

    def fetch(self, task: Task) -> str:
        return self._fetcher.fetch(task.url)

    @abstractmethod
    def parse(self, markup: str) -> Any:
        ...

    @staticmethod
    def _now_ms() -> int:
        return int(time.time() * 1000)
