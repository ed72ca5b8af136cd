from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .fetchers import DEFAULT_USER_AGENT

DEFAULT_BASE_URL = "https://www.backloggd.com"
DEFAULT_TIMEOUT = 20.0
DEFAULT_IMPERSONATE = "chrome120"
DEFAULT_MAX_WORKERS = 2
DEFAULT_LOG_LEVEL = "INFO"

ENV_PREFIX = "BACKLOGGD_"


@dataclass(frozen=True)
class Settings:
    """Runtime settings for fetching and scheduling.

    An empty ``impersonate`` switches fetching from curl_cffi to plain requests.
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    impersonate: str = DEFAULT_IMPERSONATE
    max_workers: int = DEFAULT_MAX_WORKERS
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from BACKLOGGD_* environment variables."""
        env = os.environ if environ is None else environ

        def get(name: str, default: str) -> str:
            return env.get(ENV_PREFIX + name, default)

        timeout = _parse_number(get("TIMEOUT", str(DEFAULT_TIMEOUT)), float, "TIMEOUT")
        max_workers = _parse_number(get("MAX_WORKERS", str(DEFAULT_MAX_WORKERS)), int, "MAX_WORKERS")
        if timeout <= 0:
            raise ValueError(f"{ENV_PREFIX}TIMEOUT must be positive, got {timeout}")
        if max_workers < 1:
            raise ValueError(f"{ENV_PREFIX}MAX_WORKERS must be at least 1, got {max_workers}")

        return cls(
            base_url=get("BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            timeout=timeout,
            user_agent=get("USER_AGENT", DEFAULT_USER_AGENT),
            impersonate=get("IMPERSONATE", DEFAULT_IMPERSONATE),
            max_workers=max_workers,
            log_level=get("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )


def _parse_number(raw: str, kind: type, name: str):
    try:
        return kind(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}") from None
