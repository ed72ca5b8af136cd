"""Tests for Settings.from_env()."""

import unittest

from backloggd_scraper.config import DEFAULT_BASE_URL, Settings


class TestSettingsFromEnv(unittest.TestCase):
    """Verify environment variables override defaults."""

    def test_defaults_when_unset(self):
        settings = Settings.from_env({})
        self.assertEqual(settings, Settings())
        self.assertEqual(settings.base_url, DEFAULT_BASE_URL)

    def test_overrides(self):
        settings = Settings.from_env(
            {
                "BACKLOGGD_BASE_URL": "http://localhost:8000/",
                "BACKLOGGD_TIMEOUT": "3.5",
                "BACKLOGGD_IMPERSONATE": "",
                "BACKLOGGD_MAX_WORKERS": "4",
                "BACKLOGGD_LOG_LEVEL": "debug",
            }
        )
        self.assertEqual(settings.base_url, "http://localhost:8000")
        self.assertEqual(settings.timeout, 3.5)
        self.assertEqual(settings.impersonate, "")
        self.assertEqual(settings.max_workers, 4)
        self.assertEqual(settings.log_level, "DEBUG")

    def test_invalid_numbers_raise(self):
        for env in (
            {"BACKLOGGD_TIMEOUT": "soon"},
            {"BACKLOGGD_TIMEOUT": "0"},
            {"BACKLOGGD_MAX_WORKERS": "two"},
            {"BACKLOGGD_MAX_WORKERS": "0"},
        ):
            with self.subTest(env=env):
                with self.assertRaises(ValueError):
                    Settings.from_env(env)


if __name__ == "__main__":
    unittest.main()
