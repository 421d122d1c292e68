"""Fetch a whole film diary: first page, then the rest concurrently."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from functools import partial

import httpx

from filmdiary.config import Config
from filmdiary.errors import DiaryFetchError, InvalidProfileURLError
from filmdiary.models import DiaryEntry, DiaryResult, PageBundle
from filmdiary.pagination import plan_page_urls
from filmdiary.parser import parse_page
from filmdiary.utils.http import Fetch, fetch_page

logger = logging.getLogger(__name__)


def diary_url(user: str, *, origin: str = "https://letterboxd.com/") -> str:
    """Turn a username into its diary URL; full URLs pass through."""
    if user.startswith(("http://", "https://")):
        return user
    username = user.strip().strip("/")
    return f"{origin.rstrip('/')}/{username}/films/diary/"


async def _fetch_html(fetch: Fetch, url: str, headers: Mapping[str, str]) -> str:
    try:
        status, text = await fetch(url, headers)
    except (httpx.HTTPError, httpx.InvalidURL, OSError) as e:
        logger.warning("Request to %s failed: %s", url, e)
        raise DiaryFetchError(f"Failed to fetch data: {e}") from e
    if status >= 400:
        logger.warning("Request to %s returned HTTP %s", url, status)
        raise DiaryFetchError(f"Failed to fetch data: HTTP {status} from {url}")
    return text


async def _fetch_bundle(fetch: Fetch, url: str, headers: Mapping[str, str]) -> PageBundle:
    html = await _fetch_html(fetch, url, headers)
    return parse_page(html)


async def fetch_all_entries(
    profile_url: str,
    *,
    fetch: Fetch | None = None,
    config: Config | None = None,
) -> DiaryResult:
    """Fetch and parse every page of the diary at *profile_url*.

    Either every page is fetched and the merged result is returned, or
    :class:`DiaryError` is raised; partial diaries are never returned.
    """
    config = config or Config.from_env()
    logger.info("Fetching diary %s", profile_url)

    if not profile_url.startswith(config.allowed_origin):
        raise InvalidProfileURLError(f"Invalid URL: {profile_url}")

    if fetch is None:
        fetch = partial(fetch_page, timeout=config.http_timeout)
    headers = config.headers()

    first = await _fetch_bundle(fetch, profile_url, headers)
    page_urls = plan_page_urls(profile_url, first.page_count)
    logger.info("Diary %s has %d page(s)", profile_url, max(first.page_count, 1))

    # gather() returns results in argument order, i.e. by page number.
    rest = await asyncio.gather(*(_fetch_bundle(fetch, url, headers) for url in page_urls))

    entries: list[DiaryEntry] = list(first.entries)
    for bundle in rest:
        entries.extend(bundle.entries)

    return DiaryResult(entries=entries, identity=first.identity)
