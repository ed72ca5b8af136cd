"""Tests for parse_profile()."""

import unittest

from backloggd_scraper.errors import ParseError
from backloggd_scraper.models import FavoriteGame
from backloggd_scraper.parsers import parse_profile

from html_pages import favorite_card, profile_page


class TestParseProfile(unittest.TestCase):
    """Verify a well-formed profile page is fully extracted."""

    def test_parses_identity_and_counters(self):
        """Name, bio and the three labelled counters should be extracted."""
        profile = parse_profile(profile_page())
        self.assertEqual(profile.name, "bapanadavibes")
        self.assertEqual(profile.bio, "Mostly RPGs.\nSometimes roguelikes.")
        self.assertEqual(profile.games_played_total, 120)
        self.assertEqual(profile.games_played_this_year, 15)
        self.assertEqual(profile.games_backloggd, 340)
        self.assertIsNone(profile.review_stats)

    def test_favorites_keep_document_order(self):
        """Favorites should be returned in page order with all attributes."""
        profile = parse_profile(profile_page())
        self.assertEqual(
            profile.favorites,
            [
                FavoriteGame("Outer Wilds", "/games/outer-wilds/", "https://images.example.com/outer-wilds.jpg"),
                FavoriteGame("Hades", "/games/hades/", "https://images.example.com/hades.jpg"),
            ],
        )

    def test_favorites_length_matches_cards(self):
        """N favorite cards should produce exactly N favorites."""
        for count in (0, 1, 5):
            with self.subTest(count=count):
                cards = [favorite_card(f"Game {i}", f"/games/{i}/", f"https://img/{i}.jpg") for i in range(count)]
                profile = parse_profile(profile_page(favorites=cards))
                self.assertEqual(len(profile.favorites), count)
                self.assertEqual([f.name for f in profile.favorites], [f"Game {i}" for i in range(count)])

    def test_unknown_stats_blocks_are_ignored(self):
        """Blocks whose labels match no counter should not affect the result."""
        stats = (
            ("Total Games Played", "120"),
            ("Hours Logged", "not a number"),
            ("Played in 2024", "15"),
            ("Games Backloggd", "340"),
        )
        profile = parse_profile(profile_page(stats=stats))
        self.assertEqual(profile.games_played_total, 120)
        self.assertEqual(profile.games_backloggd, 340)

    def test_name_is_trimmed(self):
        profile = parse_profile(profile_page(name="  someone \n"))
        self.assertEqual(profile.name, "someone")

    def test_missing_stats_panel_gives_zero_counters(self):
        """A profile without a stats panel still parses, with every counter at zero."""
        profile = parse_profile(profile_page(include_stats_panel=False))
        self.assertEqual(profile.games_played_total, 0)
        self.assertEqual(profile.games_played_this_year, 0)
        self.assertEqual(profile.games_backloggd, 0)
        self.assertEqual(len(profile.favorites), 2)


class TestParseProfileFailures(unittest.TestCase):
    """Verify each failing field is reported by name."""

    def assertFailsOn(self, markup, field):
        with self.assertRaises(ParseError) as ctx:
            parse_profile(markup)
        self.assertEqual(ctx.exception.field, field)

    def test_empty_name(self):
        self.assertFailsOn(profile_page(name=""), "name")

    def test_missing_name(self):
        self.assertFailsOn(profile_page().replace('class="main-header"', 'class="other"'), "name")

    def test_empty_bio(self):
        self.assertFailsOn(profile_page(bio=""), "bio")

    def test_non_numeric_counter_names_that_counter(self):
        """A non-integer value should fail on the counter it belongs to."""
        cases = {
            "games_played_total": (("Total Games Played", "many"), ("Played in 2024", "15"), ("Games Backloggd", "340")),
            "games_played_this_year": (("Total Games Played", "120"), ("Played in 2024", "1.5"), ("Games Backloggd", "340")),
            "games_backloggd": (("Total Games Played", "120"), ("Played in 2024", "15"), ("Games Backloggd", "")),
        }
        for field, stats in cases.items():
            with self.subTest(field=field):
                self.assertFailsOn(profile_page(stats=stats), field)

    def test_favorite_without_href(self):
        cards = [favorite_card("Hades", None, "https://img/hades.jpg")]
        self.assertFailsOn(profile_page(favorites=cards), "favorite_url")

    def test_favorite_without_alt(self):
        cards = [favorite_card(None, "/games/hades/", "https://img/hades.jpg")]
        self.assertFailsOn(profile_page(favorites=cards), "favorite_name")

    def test_favorite_without_src(self):
        cards = [favorite_card("Hades", "/games/hades/", None)]
        self.assertFailsOn(profile_page(favorites=cards), "favorite_image_url")

    def test_first_failing_field_wins(self):
        """With both bio and stats broken, the bio failure is reported."""
        markup = profile_page(bio="", stats=(("Total Games Played", "x"),))
        self.assertFailsOn(markup, "bio")


if __name__ == "__main__":
    unittest.main()
