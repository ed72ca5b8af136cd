"""User and review lookups: the entry points used by the chat bot.

``lookup_user`` runs the profile and reviews-page pipelines concurrently and
joins them into a single UserProfile. Both pipelines always run to completion;
when one fails the profile failure is reported ahead of the stats failure so
the error a user sees does not depend on which request finished first.
"""
from __future__ import annotations

import dataclasses
import re
import uuid
from concurrent.futures import wait
from typing import Optional
from urllib.parse import urlsplit

from loguru import logger

from .config import Settings
from .controller import ThreadPoolController
from .errors import JoinError
from .factory import ScraperFactory
from .models import PROFILE_PAGE, REVIEW_PAGE, REVIEW_STATS_PAGE, Review, ScrapeResult, Task, UserProfile

USER_ID_RE = re.compile(r"[A-Za-z0-9_-]{1,16}")
REVIEW_HOSTS = ("backloggd.com", "www.backloggd.com")
REVIEW_PATH_RE = re.compile(r"/u/[A-Za-z0-9_-]{1,16}/review/\d+/?")


def validate_user_id(user_id: str) -> str:
    user_id = (user_id or "").strip()
    if not USER_ID_RE.fullmatch(user_id):
        raise ValueError(f"Invalid backloggd user id: {user_id!r}")
    return user_id


def validate_review_url(url: str) -> str:
    url = (url or "").strip()
    parts = urlsplit(url)
    if parts.scheme != "https" or parts.netloc.lower() not in REVIEW_HOSTS or not REVIEW_PATH_RE.fullmatch(parts.path):
        raise ValueError(f"Invalid backloggd review URL: {url!r}")
    return url


def profile_url(base_url: str, user_id: str) -> str:
    return f"{base_url.rstrip('/')}/u/{user_id}/"


def reviews_url(base_url: str, user_id: str) -> str:
    return f"{base_url.rstrip('/')}/u/{user_id}/reviews/"


class BackloggdClient:
    """Runs lookups against backloggd.com.

    The worker pool is ready once the client is built. Use it as a context
    manager, or call ``stop`` explicitly, so the pool is shut down when the
    client is no longer needed; ``start`` brings it back up.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        factory: Optional[ScraperFactory] = None,
        controller: Optional[ThreadPoolController] = None,
    ) -> None:
        self._settings = settings or Settings()
        self._factory = factory or ScraperFactory(self._settings)
        self._controller = controller or ThreadPoolController(max_workers=self._settings.max_workers)

    def start(self) -> None:
        self._controller.start()

    def stop(self) -> None:
        self._controller.stop(wait=True)

    def __enter__(self) -> "BackloggdClient":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()

    def lookup_user(self, user_id: str) -> UserProfile:
        """Fetch a user's profile and review stats concurrently and join them.

        Raises ValueError for a malformed user id and JoinError wrapping the
        first failure (profile checked before stats) otherwise.
        """
        user_id = validate_user_id(user_id)
        logger.info("Looking up user {}", user_id)

        profile_task = self._task(PROFILE_PAGE, profile_url(self._settings.base_url, user_id))
        stats_task = self._task(REVIEW_STATS_PAGE, reviews_url(self._settings.base_url, user_id))

        profile_future = self._controller.submit(self._factory.create_scraper(profile_task).run, profile_task)
        stats_future = self._controller.submit(self._factory.create_scraper(stats_task).run, stats_task)

        # both pipelines finish before either outcome is read, then profile is checked first
        wait([profile_future, stats_future])
        profile_result: ScrapeResult = profile_future.result()
        stats_result: ScrapeResult = stats_future.result()

        if not profile_result.success:
            raise JoinError(PROFILE_PAGE, profile_result.error) from profile_result.error
        if not stats_result.success:
            raise JoinError(REVIEW_STATS_PAGE, stats_result.error) from stats_result.error

        return dataclasses.replace(profile_result.data, review_stats=stats_result.data)

    def lookup_review(self, url: str) -> Review:
        """Fetch and parse a single review, raising its FetchError/ParseError on failure."""
        url = validate_review_url(url)
        logger.info("Looking up review {}", url)

        task = self._task(REVIEW_PAGE, url)
        review: Review = self._factory.create_scraper(task).run(task).unwrap()
        return dataclasses.replace(review, url=url)

    @staticmethod
    def _task(page: str, url: str) -> Task:
        return Task(task_id=str(uuid.uuid4()), page=page, url=url)
