from __future__ import annotations

from typing import Optional


class ScrapeError(Exception):
    """Base class for every failure a pipeline can report."""


class FetchError(ScrapeError):
    """The page could not be retrieved (transport error or non-2xx status)."""

    def __init__(self, url: str, cause: Optional[BaseException] = None, status_code: Optional[int] = None) -> None:
        self.url = url
        self.cause = cause
        self.status_code = status_code
        if status_code is not None:
            reason = f"HTTP {status_code}"
        elif cause is not None:
            reason = f"{type(cause).__name__}: {cause}"
        else:
            reason = "unknown error"
        super().__init__(f"failed to fetch {url}: {reason}")


# Failure kind reported for each field a parser can fail on.
FAILURE_KINDS = {
    "name": "InvalidUsername",
    "bio": "InvalidBio",
    "games_played_total": "InvalidTotalGamesPlayed",
    "games_played_this_year": "InvalidGamesPlayedThisYear",
    "games_backloggd": "InvalidGamesBackloggd",
    "favorite_url": "InvalidFavURL",
    "favorite_name": "InvalidFavName",
    "favorite_image_url": "InvalidFavImageURL",
    "fav_count": "InvalidFavCount",
    "review_count": "InvalidReviewCount",
    "review_stats": "InvalidReviewStats",
    "title": "InvalidTitle",
    "game_url": "InvalidGameURL",
    "game_image_url": "InvalidGameImageURL",
    "username": "InvalidReviewer",
    "rating": "InvalidRating",
    "play_type": "InvalidPlayType",
    "text": "InvalidReviewText",
    "likes": "InvalidLikes",
    "comments": "InvalidComments",
    "date": "InvalidDate",
}


class ParseError(ScrapeError):
    """A required field was missing, empty, or not representable.

    ``field`` is the record attribute that failed; ``kind`` is its failure
    name, e.g. ``InvalidUsername`` for ``name``.
    """

    def __init__(self, field: str, detail: str = "") -> None:
        self.field = field
        self.detail = detail
        message = f"error parsing {field} from HTML"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)

    @property
    def kind(self) -> str:
        return FAILURE_KINDS.get(self.field, "Invalid" + self.field.title().replace("_", ""))


class JoinError(ScrapeError):
    """One of the joined pipelines failed; ``cause`` is its original error."""

    def __init__(self, pipeline: str, cause: ScrapeError) -> None:
        self.pipeline = pipeline
        self.cause = cause
        super().__init__(f"{pipeline} pipeline failed: {cause}")
