"""Film slug normalization."""

from __future__ import annotations


def strip_year_suffix(slug: str) -> str:
    """Drop a trailing ``-YYYY`` from *slug*.

    Slugs of remakes carry the release year (``oppenheimer-2023``) but poster
    URLs are built from the bare title slug.
    """
    if len(slug) < 5:
        return slug
    head, sep, tail = slug.rpartition("-")
    if sep and len(tail) == 4 and tail.isascii() and tail.isdigit():
        return head
    return slug
