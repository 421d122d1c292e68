"""Diary page parser.

Turns the HTML of one diary page into a :class:`PageBundle`. Parsing never
raises on odd markup: a missing element or a malformed value only blanks
that one field, either through :func:`_optional` or an explicit check.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import date
from typing import TypeVar

from bs4 import BeautifulSoup
from bs4.element import Tag

from filmdiary.models import DiaryEntry, PageBundle, ProfileIdentity
from filmdiary.slugs import strip_year_suffix

logger = logging.getLogger(__name__)

T = TypeVar("T")

POSTER_BASE = "https://a.ltrbxd.com/resized/film-poster"
_POSTER_SIZE = "0-300-0-450-crop"
_AVATAR_SMALL = "-0-48-0-48-crop"
_AVATAR_LARGE = "-0-220-0-220-crop"
# Titles read "&lrm;Bob’s film diary • Letterboxd".
_NAME_DELIMITER = "’"
_INTEGER = re.compile(r"[+-]?[0-9]+\Z")


def _optional(extract: Callable[[], T], default: T, field: str) -> T:
    """Run *extract*, falling back to *default* if the markup doesn't fit."""
    try:
        return extract()
    except (AttributeError, KeyError, TypeError, ValueError, IndexError) as e:
        logger.debug("Could not extract %s: %s", field, e)
        return default


def _attr(tag: Tag | None, name: str) -> str | None:
    """Stripped attribute value, or None when missing or blank."""
    if tag is None:
        return None
    value = tag.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    if not value or not value.strip():
        return None
    return value.strip()


# ------------------------------------------------------------------
# Derived fields
# ------------------------------------------------------------------


def build_image_url(media_id: str | None, slug: str | None) -> str | None:
    """Poster URL for a film; each character of the id is a path segment."""
    if not media_id or not slug:
        return None
    path = "/".join(media_id)
    return f"{POSTER_BASE}/{path}/{media_id}-{slug}-{_POSTER_SIZE}.jpg"


def parse_logged_date(href: str | None) -> date | None:
    """Rebuild the diary date from a ``.../for/YYYY/MM/DD/`` link."""
    if not href:
        return None
    parts = [p for p in href.split("/") if p]
    if "for" not in parts:
        return None
    idx = parts.index("for")
    if len(parts) <= idx + 3:
        return None
    year, month, day = parts[idx + 1 : idx + 4]
    return _optional(
        lambda: date(int(year), int(month), int(day)), None, "logged_date"
    )


def parse_score(value: str | None) -> int | None:
    if value is None:
        return None
    value = value.strip()
    if not _INTEGER.match(value):
        logger.debug("Could not extract score: %r", value)
        return None
    return int(value)


# ------------------------------------------------------------------
# Page-level extraction
# ------------------------------------------------------------------


def parse_page_count(soup: BeautifulSoup) -> int:
    """Number of pagination links; 0 for single-page diaries."""
    return len(soup.select(".paginate-pages li.paginate-page"))


def _parse_display_name(soup: BeautifulSoup) -> str:
    title = soup.title.get_text().strip()
    name = title.split(_NAME_DELIMITER)[0].strip()
    # The site prefixes the name with a left-to-right mark.
    return name[1:]


def _parse_avatar_url(soup: BeautifulSoup) -> str | None:
    src = _attr(soup.select_one(".profile-mini-person .avatar img"), "src")
    if src and _AVATAR_SMALL in src:
        return src.replace(_AVATAR_SMALL, _AVATAR_LARGE)
    return None


def parse_identity(soup: BeautifulSoup) -> ProfileIdentity:
    return ProfileIdentity(
        display_name=_optional(lambda: _parse_display_name(soup), "", "display_name"),
        avatar_url=_optional(lambda: _parse_avatar_url(soup), None, "avatar_url"),
    )


def parse_row(row: Tag) -> DiaryEntry:
    """Extract one diary entry from a ``tr.diary-entry-row``."""
    film = row.select_one("td.td-film-details div[data-film-id]")
    media_id = _attr(film, "data-film-id")
    raw_slug = _attr(film, "data-film-slug")
    slug = strip_year_suffix(raw_slug) if raw_slug else None
    if not slug:
        # "-2023" normalizes to an empty slug
        slug = None

    title = _optional(
        lambda: row.select_one("td.td-film-details h3.headline-3 a").get_text().strip(),
        "",
        "title",
    )
    logged_date = parse_logged_date(_attr(row.select_one("td.td-day a"), "href"))

    rating = row.select_one("td.td-rating input.rateit-field")
    score = parse_score(rating.get("value") if rating is not None else None)

    favorited = row.select_one("td.td-like .icon-liked") is not None

    return DiaryEntry(
        media_id=media_id,
        slug=slug,
        title=title,
        image_url=build_image_url(media_id, slug),
        logged_date=logged_date,
        score=score,
        favorited=favorited,
    )


def parse_entries(soup: BeautifulSoup) -> list[DiaryEntry]:
    return [parse_row(row) for row in soup.select("tr.diary-entry-row")]


def parse_page(html: str) -> PageBundle:
    """Parse one diary page into page count, identity and entries."""
    soup = BeautifulSoup(html, "html.parser")
    return PageBundle(
        page_count=parse_page_count(soup),
        identity=parse_identity(soup),
        entries=parse_entries(soup),
    )
