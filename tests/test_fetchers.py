"""Tests for the document fetchers (network is mocked)."""

import unittest
from unittest import mock

import requests
from curl_cffi import CurlError

from backloggd_scraper.errors import FetchError
from backloggd_scraper.fetchers import CurlFetcher, RequestsFetcher


def _response(status_code=200, text="<html></html>"):
    return mock.Mock(status_code=status_code, text=text)


class TestRequestsFetcher(unittest.TestCase):
    """Verify RequestsFetcher returns markup or raises FetchError."""

    @mock.patch("backloggd_scraper.fetchers.requests.get")
    def test_returns_markup(self, get):
        get.return_value = _response(text="<body>hi</body>")
        fetcher = RequestsFetcher(timeout=5, user_agent="test-agent")
        self.assertEqual(fetcher.fetch("https://example.com/u/x/"), "<body>hi</body>")
        get.assert_called_once_with(
            "https://example.com/u/x/", headers={"User-Agent": "test-agent"}, timeout=5
        )

    @mock.patch("backloggd_scraper.fetchers.requests.get")
    def test_non_2xx_raises(self, get):
        get.return_value = _response(status_code=404)
        with self.assertRaises(FetchError) as ctx:
            RequestsFetcher().fetch("https://example.com/u/missing/")
        self.assertEqual(ctx.exception.status_code, 404)
        self.assertEqual(ctx.exception.url, "https://example.com/u/missing/")

    @mock.patch("backloggd_scraper.fetchers.requests.get")
    def test_transport_error_wrapped(self, get):
        get.side_effect = requests.ConnectionError("network down")
        with self.assertRaises(FetchError) as ctx:
            RequestsFetcher().fetch("https://example.com/")
        self.assertIsInstance(ctx.exception.cause, requests.ConnectionError)
        self.assertIn("network down", str(ctx.exception))


class TestCurlFetcher(unittest.TestCase):
    """Verify CurlFetcher impersonates a browser and closes its session."""

    @mock.patch("backloggd_scraper.fetchers.curl_requests.Session")
    def test_returns_markup_and_closes_session(self, session_cls):
        session = session_cls.return_value
        session.get.return_value = _response(text="<body>ok</body>")
        fetcher = CurlFetcher(timeout=7, impersonate="chrome120")

        self.assertEqual(fetcher.fetch("https://example.com/"), "<body>ok</body>")
        session.get.assert_called_once_with(
            "https://example.com/", headers=None, impersonate="chrome120", timeout=7
        )
        session.close.assert_called_once()

    @mock.patch("backloggd_scraper.fetchers.curl_requests.Session")
    def test_transport_error_wrapped(self, session_cls):
        session = session_cls.return_value
        session.get.side_effect = CurlError("timed out")
        with self.assertRaises(FetchError) as ctx:
            CurlFetcher().fetch("https://example.com/")
        self.assertIsInstance(ctx.exception.cause, CurlError)
        session.close.assert_called_once()

    @mock.patch("backloggd_scraper.fetchers.curl_requests.Session")
    def test_forbidden_raises(self, session_cls):
        session_cls.return_value.get.return_value = _response(status_code=403)
        with self.assertRaises(FetchError) as ctx:
            CurlFetcher().fetch("https://example.com/")
        self.assertEqual(ctx.exception.status_code, 403)


if __name__ == "__main__":
    unittest.main()
