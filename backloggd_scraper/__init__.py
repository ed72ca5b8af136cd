"""Backloggd page scraper package.

Fetches backloggd.com profile and review pages, extracts typed records from
their HTML, and joins a user's profile with their review stats.

Key modules:
    models          -- UserProfile, FavoriteGame, ReviewStats, Review, Task, ScrapeResult
    errors          -- ScrapeError, FetchError, ParseError, JoinError
    page_selectors  -- CSS selectors and labels matched against the site's markup
    extract         -- stateless node and attribute extraction helpers
    parsers         -- parse_profile, parse_review_stats, parse_review
    fetchers        -- RequestsFetcher, CurlFetcher
    base            -- BaseScraper fetch -> parse pipeline
    scrapers        -- ProfileScraper, ReviewStatsScraper, ReviewScraper
    factory         -- ScraperFactory for creating scrapers
    controller      -- ThreadPoolController running pipelines concurrently
    lookup          -- BackloggdClient with lookup_user / lookup_review
    config          -- Settings loaded from BACKLOGGD_* environment variables
"""
