"""CSS selectors and label strings matched against backloggd.com markup.

Every selector the parsers use lives here so that a change in the site's
markup only needs an update to this table.
"""
from __future__ import annotations

# Profile page (/u/<user>/)
PROFILE_NAME = "h3.main-header"
PROFILE_BIO = "span#bio-body"
PROFILE_STATS_PANEL = "div#profile-stats"
PROFILE_STAT_LABEL = "h4"
PROFILE_STAT_VALUE = "h1"
PROFILE_FAVORITE_CARD = "div#profile-favorites div.fav-game-div"
PROFILE_FAVORITE_LINK = "a"
PROFILE_FAVORITE_IMAGE = "img"

LABEL_TOTAL_PLAYED = "Total Games Played"
LABEL_PLAYED_IN_YEAR = "Played in"
LABEL_BACKLOGGD = "Games Backloggd"

# Reviews page (/u/<user>/reviews/)
REVIEW_STATS_HEADING = "div#reviews-header h2"
REVIEW_STATS_COUNTER = "b"

# Single review page (/u/<user>/review/<id>/)
REVIEW_COVER_IMAGE = "div#review-sidebar img.card-img"
REVIEW_GAME_LINK = "div#review-sidebar div.game-info a"
REVIEW_TOP_BAR_PARAGRAPH = "div#review-top-bar p"
REVIEW_RATING = "div#review-top-bar div.stars-top"
REVIEW_PLAY_TYPE = "div#review-top-bar p.play-type"
REVIEW_PLATFORM = "div#review-top-bar p.review-platform"
REVIEW_TEXT = "div.review-body div.card-text"
REVIEW_LIKE_COUNTER = "p.like-counter"
REVIEW_COMMENTS_HEADER = "h2#comments-header"
REVIEW_BOTTOM_BAR_PARAGRAPH = "div#review-bottom-bar p"

RATING_STYLE_PREFIX = "width:"
RATING_STYLE_SUFFIX = "%"
LIKES_SUFFIX = " Likes"
COMMENTS_SUFFIX = " Comments"
DATE_PREFIX = "Reviewed on "
