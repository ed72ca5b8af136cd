from __future__ import annotations

from typing import Callable, Dict, Optional, Type

from .base import BaseScraper
from .config import Settings
from .fetchers import CurlFetcher, DocumentFetcher, RequestsFetcher
from .models import PROFILE_PAGE, REVIEW_PAGE, REVIEW_STATS_PAGE, Task
from .scrapers import ProfileScraper, ReviewScraper, ReviewStatsScraper

FetcherFactory = Callable[[], DocumentFetcher]

_SCRAPERS: Dict[str, Type[BaseScraper]] = {
    PROFILE_PAGE: ProfileScraper,
    REVIEW_STATS_PAGE: ReviewStatsScraper,
    REVIEW_PAGE: ReviewScraper,
}


class ScraperFactory:
    """Factory for creating scraper instances based on the task's page kind.

    Every scraper gets a freshly built fetcher, so concurrent pipelines never
    share a session. Pass ``fetcher_factory`` to override how fetchers are
    built (tests use in-memory fetchers).
    """

    def __init__(self, settings: Optional[Settings] = None, fetcher_factory: Optional[FetcherFactory] = None) -> None:
        self._settings = settings or Settings()
        self._fetcher_factory = fetcher_factory or self._default_fetcher

    def create_scraper(self, task: Task) -> BaseScraper:
        scraper_cls = _SCRAPERS.get(task.page)
        if scraper_cls is None:
            raise ValueError(f"Unknown page kind: {task.page}")
        return scraper_cls(fetcher=self._fetcher_factory())

    def _default_fetcher(self) -> DocumentFetcher:
        if self._settings.impersonate:
            return CurlFetcher(
                timeout=self._settings.timeout,
                impersonate=self._settings.impersonate,
            )
        return RequestsFetcher(timeout=self._settings.timeout, user_agent=self._settings.user_agent)
