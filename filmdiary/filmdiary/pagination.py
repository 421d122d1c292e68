"""Pagination planning for multi-page diaries."""

from __future__ import annotations


def plan_page_urls(base_url: str, page_count: int) -> list[str]:
    """URLs for pages 2..*page_count* of the diary at *base_url*."""
    if not base_url.endswith("/"):
        base_url += "/"
    return [f"{base_url}page/{page}/" for page in range(2, page_count + 1)]
