"""Side-by-side comparison of two diaries."""

from __future__ import annotations

import asyncio
import logging

from pydantic import Field

from filmdiary.config import Config
from filmdiary.diary import diary_url, fetch_all_entries
from filmdiary.errors import DiaryError
from filmdiary.models import CamelModel, DiaryEntry, DiaryResult
from filmdiary.utils.http import Fetch

logger = logging.getLogger(__name__)


class SharedFilm(CamelModel):
    """A film both profiles have logged."""

    media_id: str
    title: str = ""
    image_url: str | None = None
    first_score: int | None = None
    second_score: int | None = None
    first_favorited: bool = False
    second_favorited: bool = False


class DiaryComparison(CamelModel):
    """Films two diaries share and films only one of them has."""

    shared: list[SharedFilm] = Field(default_factory=list)
    only_first: list[DiaryEntry] = Field(default_factory=list)
    only_second: list[DiaryEntry] = Field(default_factory=list)


async def fetch_pair(
    first: str,
    second: str,
    *,
    fetch: Fetch | None = None,
    config: Config | None = None,
) -> tuple[DiaryResult, DiaryResult]:
    """Fetch two diaries concurrently; fail if either one fails."""
    config = config or Config.from_env()
    users = (first, second)
    results = await asyncio.gather(
        *(
            fetch_all_entries(
                diary_url(user, origin=config.allowed_origin), fetch=fetch, config=config
            )
            for user in users
        ),
        return_exceptions=True,
    )
    for user, result in zip(users, results):
        if isinstance(result, DiaryError):
            raise DiaryError(f"Error fetching {user}: {result}") from result
        if isinstance(result, BaseException):
            raise result
    return results[0], results[1]


def _by_film(entries: list[DiaryEntry]) -> dict[str, list[DiaryEntry]]:
    """Group entries by film id, keeping first-seen order; rewatches collapse."""
    grouped: dict[str, list[DiaryEntry]] = {}
    for entry in entries:
        if entry.media_id:
            grouped.setdefault(entry.media_id, []).append(entry)
    return grouped


def _best_score(entries: list[DiaryEntry]) -> int | None:
    scores = [e.score for e in entries if e.score is not None]
    return max(scores) if scores else None


def compare_diaries(first: DiaryResult, second: DiaryResult) -> DiaryComparison:
    """Match films by id; entries without an id are left out."""
    a = _by_film(first.entries)
    b = _by_film(second.entries)

    shared: list[SharedFilm] = []
    for media_id, a_entries in a.items():
        b_entries = b.get(media_id)
        if not b_entries:
            continue
        head = a_entries[0]
        shared.append(
            SharedFilm(
                media_id=media_id,
                title=head.title or b_entries[0].title,
                image_url=head.image_url or b_entries[0].image_url,
                first_score=_best_score(a_entries),
                second_score=_best_score(b_entries),
                first_favorited=any(e.favorited for e in a_entries),
                second_favorited=any(e.favorited for e in b_entries),
            )
        )

    logger.debug("Compared %d vs %d films, %d shared", len(a), len(b), len(shared))
    return DiaryComparison(
        shared=shared,
        only_first=[group[0] for mid, group in a.items() if mid not in b],
        only_second=[group[0] for mid, group in b.items() if mid not in a],
    )
