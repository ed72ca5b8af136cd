from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from .errors import ScrapeError

PROFILE_PAGE = "profile"
REVIEW_STATS_PAGE = "review_stats"
REVIEW_PAGE = "review"

BIO_PREVIEW_CHARS = 300


@dataclass(frozen=True)
class FavoriteGame:
    name: str
    url: str
    image_url: str


@dataclass(frozen=True)
class ReviewStats:
    review_count: int
    fav_count: int


@dataclass(frozen=True)
class UserProfile:
    """A user's profile page, optionally joined with their review stats.

    ``review_stats`` is ``None`` until the profile has been merged with the
    user's reviews page."""

    name: str
    bio: str
    games_played_total: int = 0
    games_played_this_year: int = 0
    games_backloggd: int = 0
    favorites: List[FavoriteGame] = field(default_factory=list)
    review_stats: Optional[ReviewStats] = None

    @property
    def short_bio(self) -> str:
        """First line of the bio, truncated for previews."""
        newline = self.bio.find("\n", 1)
        if newline > 0:
            return self.bio[:newline]
        if len(self.bio) > BIO_PREVIEW_CHARS:
            return self.bio[:BIO_PREVIEW_CHARS] + "..."
        return self.bio


@dataclass(frozen=True)
class Review:
    title: str
    username: str
    game_url: str
    game_image_url: str
    play_type: str
    platform: str
    rating: Optional[int]
    text: str
    likes: int
    comments: int
    date: str
    url: str = ""

    @property
    def stars(self) -> Optional[float]:
        """Rating on the site's five star scale, or None when unrated."""
        if self.rating is None:
            return None
        return self.rating / 20.0


@dataclass(frozen=True)
class Task:
    task_id: str
    page: str
    url: str


@dataclass(frozen=True)
class ScrapeResult:
    """Outcome of one fetch+parse pipeline: either data or an error."""

    task_id: str
    page: str
    url: str
    success: bool
    latency_ms: int
    data: Optional[Any]
    error: Optional[ScrapeError] = None

    @property
    def error_type(self) -> Optional[str]:
        return type(self.error).__name__ if self.error is not None else None

    def unwrap(self) -> Any:
        """Return the parsed record, raising the pipeline's error on failure."""
        if self.error is not None:
            raise self.error
        return self.data
