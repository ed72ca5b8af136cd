from __future__ import annotations

import argparse
import dataclasses
import json
import sys
from typing import Optional, Sequence

from loguru import logger

from backloggd_scraper.config import Settings
from backloggd_scraper.errors import ScrapeError
from backloggd_scraper.lookup import BackloggdClient


def _configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)


def _build_settings(args: argparse.Namespace) -> Settings:
    settings = Settings.from_env()
    overrides = {}
    if args.base_url is not None:
        overrides["base_url"] = args.base_url.rstrip("/")
    if args.timeout is not None:
        overrides["timeout"] = args.timeout
    if args.impersonate is not None:
        overrides["impersonate"] = args.impersonate
    if args.max_workers is not None:
        overrides["max_workers"] = args.max_workers
    if args.log_level is not None:
        overrides["log_level"] = args.log_level.upper()
    return dataclasses.replace(settings, **overrides)


def _print_record(record) -> None:
    print(json.dumps(dataclasses.asdict(record), ensure_ascii=False, indent=2))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Look up backloggd.com users and reviews")
    parser.add_argument("--base-url", default=None, help="Site root (default: $BACKLOGGD_BASE_URL or https://www.backloggd.com)")
    parser.add_argument("--timeout", type=float, default=None, help="Per-request timeout in seconds")
    parser.add_argument("--impersonate", default=None, help="curl_cffi browser profile; empty string uses plain requests")
    parser.add_argument("--max-workers", type=int, default=None, help="Thread pool size for concurrent pipelines")
    parser.add_argument("--log-level", default=None, help="loguru log level (DEBUG, INFO, WARNING, ...)")

    commands = parser.add_subparsers(dest="command", required=True)
    user_cmd = commands.add_parser("user", help="Show a user's profile joined with review stats")
    user_cmd.add_argument("user_id", help="backloggd user id")
    review_cmd = commands.add_parser("review", help="Show a single review")
    review_cmd.add_argument("url", help="Full URL of the review")

    args = parser.parse_args(argv)
    settings = _build_settings(args)
    _configure_logging(settings.log_level)

    with BackloggdClient(settings) as client:
        try:
            if args.command == "user":
                record = client.lookup_user(args.user_id)
            else:
                record = client.lookup_review(args.url)
        except (ScrapeError, ValueError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1

    _print_record(record)
    return 0


if __name__ == "__main__":
    sys.exit(main())
