"""HTTP utilities for fetching diary pages."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping

import httpx

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/129.0.0.0 Safari/537.36"
)

# Sent verbatim with every diary page request.
DIARY_HEADERS = {
    "Accept": "*/*",
    "Accept-Encoding": "gzip, deflate",
    "Accept-Language": "en-US,en;q=0.5",
    "Priority": "u=1, i",
    "Referer": "https://letterboxd.com/",
    "sec-ch-ua": '"Google Chrome";v="129", "Not=A?Brand";v="8", "Chromium";v="129"',
    "sec-ch-ua-mobile": "?0",
    "sec-ch-ua-platform": '"macOS"',
    "User-Agent": DEFAULT_USER_AGENT,
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
    "Upgrade-Insecure-Requests": "1",
}

Fetch = Callable[[str, Mapping[str, str]], Awaitable[tuple[int, str]]]
"""``fetch(url, headers) -> (status, body_text)``"""


async def fetch_page(
    url: str,
    headers: Mapping[str, str],
    *,
    timeout: float = 30.0,
    client: httpx.AsyncClient | None = None,
) -> tuple[int, str]:
    """GET *url* with *headers* as given and return ``(status, text)``.

    Transport errors propagate as :class:`httpx.HTTPError`; the status is
    returned rather than raised so callers decide what counts as failure.
    """
    if client is not None:
        resp = await client.get(url, headers=dict(headers))
        return resp.status_code, resp.text
    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as owned:
        resp = await owned.get(url, headers=dict(headers))
        return resp.status_code, resp.text
