from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import requests
from curl_cffi import CurlError
from curl_cffi import requests as curl_requests
from loguru import logger

from .errors import FetchError

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class DocumentFetcher(ABC):
    """Retrieves the markup of a page. Implementations never retry."""

    @abstractmethod
    def fetch(self, url: str) -> str:
        """Return the page markup, raising FetchError on any transport failure."""

    @staticmethod
    def _check_response(url: str, response: Any) -> str:
        status_code = getattr(response, "status_code", None)
        if status_code is None or not 200 <= int(status_code) < 300:
            raise FetchError(url, status_code=status_code)
        return response.text


class RequestsFetcher(DocumentFetcher):
    """Plain HTTP fetcher built on requests."""

    def __init__(self, timeout: float = 20, user_agent: str = DEFAULT_USER_AGENT) -> None:
        self._timeout = timeout
        self._headers: Dict[str, str] = {"User-Agent": user_agent}

    def fetch(self, url: str) -> str:
        logger.debug("GET {} (requests)", url)
        try:
            response = requests.get(url, headers=self._headers, timeout=self._timeout)
        except requests.RequestException as exc:
            raise FetchError(url, cause=exc) from exc
        return self._check_response(url, response)


class CurlFetcher(DocumentFetcher):
    """Fetcher that impersonates a browser TLS fingerprint via curl_cffi.

    A new session is opened per fetch; instances are not shared between
    pipelines.
    """

    def __init__(self, timeout: float = 20, impersonate: str = "chrome120", user_agent: Optional[str] = None) -> None:
        self._timeout = timeout
        self._impersonate = impersonate
        self._headers: Optional[Dict[str, str]] = {"User-Agent": user_agent} if user_agent else None

    def fetch(self, url: str) -> str:
        logger.debug("GET {} (curl_cffi, impersonate={})", url, self._impersonate)
        session = curl_requests.Session()
        try:
            response = session.get(
                url,
                headers=self._headers,
                impersonate=self._impersonate,
                timeout=self._timeout,
            )
        except CurlError as exc:
            raise FetchError(url, cause=exc) from exc
        finally:
            session.close()
        return self._check_response(url, response)
