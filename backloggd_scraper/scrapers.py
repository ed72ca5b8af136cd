from __future__ import annotations

from .base import BaseScraper
from .models import Review, ReviewStats, UserProfile
from .parsers import parse_profile, parse_review, parse_review_stats


class ProfileScraper(BaseScraper):
    def parse(self, markup: str) -> UserProfile:
        return parse_profile(markup)


class ReviewStatsScraper(BaseScraper):
    def parse(self, markup: str) -> ReviewStats:
        return parse_review_stats(markup)


class ReviewScraper(BaseScraper):
    def parse(self, markup: str) -> Review:
        return parse_review(markup)
