"""HTML -> record parsers for backloggd.com pages.

Each parser walks its fields in a fixed order and raises ParseError at the
first field that cannot be extracted, so a caller never sees a partially
populated record.
"""
from __future__ import annotations

from typing import Dict, List, Optional

from bs4 import Tag

from . import page_selectors as sel
from .errors import ParseError
from .extract import (
    attribute,
    extract,
    extract_first,
    extract_last,
    first_child_text,
    parse_count,
    parse_document,
    require_attribute,
    text,
)
from .models import FavoriteGame, Review, ReviewStats, UserProfile

MAX_RATING = 100


def parse_profile(markup: str) -> UserProfile:
    """Parse a user's profile page.

    Order: name, bio, stats panel, favorites. ``review_stats`` is left unset;
    it comes from a different page.
    """
    document = parse_document(markup)

    name = _parse_name(document)
    bio = _parse_bio(document)
    counters = _parse_profile_stats(document)
    favorites = _parse_favorites(document)

    return UserProfile(
        name=name,
        bio=bio,
        games_played_total=counters["games_played_total"],
        games_played_this_year=counters["games_played_this_year"],
        games_backloggd=counters["games_backloggd"],
        favorites=favorites,
    )


def parse_review_stats(markup: str) -> ReviewStats:
    """Parse the counters heading of a user's reviews page.

    The heading carries two emphasized numbers; the first is the favorite
    count and the second the review count. Labels are not inspected.
    """
    document = parse_document(markup)
    heading = extract_first(document, sel.REVIEW_STATS_HEADING, "review_stats")
    counters = extract(heading, sel.REVIEW_STATS_COUNTER)

    if not counters:
        raise ParseError("fav_count", "heading has no counters")
    fav_count = parse_count(text(counters[0]), "fav_count")

    if len(counters) < 2:
        raise ParseError("review_count", "heading has a single counter")
    review_count = parse_count(text(counters[1]), "review_count")

    return ReviewStats(review_count=review_count, fav_count=fav_count)


def parse_review(markup: str) -> Review:
    """Parse a single review page. ``url`` is left for the caller to set."""
    document = parse_document(markup)

    cover = extract_first(document, sel.REVIEW_COVER_IMAGE, "game_image_url")
    game_image_url = require_attribute(cover, "src", "game_image_url")
    title = require_attribute(cover, "alt", "title")

    game_link = extract_first(document, sel.REVIEW_GAME_LINK, "game_url")
    game_url = require_attribute(game_link, "href", "game_url")

    username = text(extract_first(document, sel.REVIEW_TOP_BAR_PARAGRAPH, "username")).strip()
    if not username:
        raise ParseError("username", "reviewer name is empty")

    rating = _parse_rating(document)

    play_type = text(extract_first(document, sel.REVIEW_PLAY_TYPE, "play_type")).strip()

    platform_nodes = extract(document, sel.REVIEW_PLATFORM)
    platform = text(platform_nodes[0]).strip() if platform_nodes else ""

    review_text = text(extract_first(document, sel.REVIEW_TEXT, "text"))

    like_counter = extract_first(document, sel.REVIEW_LIKE_COUNTER, "likes")
    likes = parse_count(_without_suffix(first_child_text(like_counter), sel.LIKES_SUFFIX), "likes")

    comments_header = extract_first(document, sel.REVIEW_COMMENTS_HEADER, "comments")
    comments_text = _without_suffix(text(comments_header), sel.COMMENTS_SUFFIX)
    comments = parse_count(comments_text, "comments") if comments_text else 0

    date = text(extract_last(document, sel.REVIEW_BOTTOM_BAR_PARAGRAPH, "date")).strip()
    if date.startswith(sel.DATE_PREFIX):
        date = date[len(sel.DATE_PREFIX):]

    return Review(
        title=title,
        username=username,
        game_url=game_url,
        game_image_url=game_image_url,
        play_type=play_type,
        platform=platform,
        rating=rating,
        text=review_text,
        likes=likes,
        comments=comments,
        date=date,
    )


def _parse_name(document: Tag) -> str:
    name = text(extract_first(document, sel.PROFILE_NAME, "name")).strip()
    if not name:
        raise ParseError("name", "header is empty")
    return name


def _parse_bio(document: Tag) -> str:
    # stored verbatim, links and formatting are flattened to text
    bio = text(extract_first(document, sel.PROFILE_BIO, "bio"))
    if not bio.strip():
        raise ParseError("bio", "bio is empty")
    return bio


def _parse_profile_stats(document: Tag) -> Dict[str, int]:
    counters = {
        "games_played_total": 0,
        "games_played_this_year": 0,
        "games_backloggd": 0,
    }

    # no stats panel leaves every counter at zero
    panels = extract(document, sel.PROFILE_STATS_PANEL)
    if not panels:
        return counters

    for block in panels[0].find_all(True, recursive=False):
        label_node = block.find(sel.PROFILE_STAT_LABEL, recursive=False)
        label = text(label_node).strip() if label_node is not None else ""

        if label == sel.LABEL_TOTAL_PLAYED:
            field = "games_played_total"
        elif sel.LABEL_PLAYED_IN_YEAR in label:
            field = "games_played_this_year"
        elif label == sel.LABEL_BACKLOGGD:
            field = "games_backloggd"
        else:
            continue

        value_node = block.find(sel.PROFILE_STAT_VALUE, recursive=False)
        if value_node is None:
            raise ParseError(field, f"stats block {label!r} has no value")
        counters[field] = parse_count(text(value_node), field)

    return counters


def _parse_favorites(document: Tag) -> List[FavoriteGame]:
    favorites: List[FavoriteGame] = []
    for card in extract(document, sel.PROFILE_FAVORITE_CARD):
        link = card.select_one(sel.PROFILE_FAVORITE_LINK)
        if link is None:
            raise ParseError("favorite_url", "favorite card has no link")
        url = require_attribute(link, "href", "favorite_url")

        image = card.select_one(sel.PROFILE_FAVORITE_IMAGE)
        if image is None:
            raise ParseError("favorite_name", "favorite card has no image")
        name = require_attribute(image, "alt", "favorite_name", allow_empty=True)
        image_url = require_attribute(image, "src", "favorite_image_url")

        favorites.append(FavoriteGame(name=name, url=url, image_url=image_url))
    return favorites


def _parse_rating(document: Tag) -> Optional[int]:
    """Read the star bar width (``width:80%``); no inline style means unrated."""
    nodes = extract(document, sel.REVIEW_RATING)
    style = attribute(nodes[0], "style") if nodes else None
    if style is None:
        return None

    value = style.strip().rstrip(";").strip()
    if value.startswith(sel.RATING_STYLE_PREFIX):
        value = value[len(sel.RATING_STYLE_PREFIX):]
    value = value.strip()
    if value.endswith(sel.RATING_STYLE_SUFFIX):
        value = value[: -len(sel.RATING_STYLE_SUFFIX)]

    rating = parse_count(value, "rating")
    if rating > MAX_RATING:
        raise ParseError("rating", f"{rating} is above {MAX_RATING}")
    return rating


def _without_suffix(value: str, suffix: str) -> str:
    value = value.rstrip()
    if value.endswith(suffix):
        value = value[: -len(suffix)]
    return value.strip()
