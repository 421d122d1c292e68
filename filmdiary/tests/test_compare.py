"""Tests for diary comparison."""

from __future__ import annotations

from collections.abc import Mapping

import pytest

from diary_pages import page_html, row_html
from filmdiary.compare import compare_diaries, fetch_pair
from filmdiary.config import Config
from filmdiary.errors import DiaryError
from filmdiary.models import DiaryEntry, DiaryResult

CONFIG = Config()


def _diary(*entries: DiaryEntry) -> DiaryResult:
    return DiaryResult(entries=list(entries))


class TestCompareDiaries:
    def test_shared_and_unique(self) -> None:
        a = _diary(
            DiaryEntry(media_id="1", title="Heat", score=9),
            DiaryEntry(media_id="2", title="Ran"),
        )
        b = _diary(
            DiaryEntry(media_id="1", title="Heat", score=6, favorited=True),
            DiaryEntry(media_id="3", title="Alien"),
        )
        result = compare_diaries(a, b)

        assert [f.media_id for f in result.shared] == ["1"]
        shared = result.shared[0]
        assert shared.first_score == 9
        assert shared.second_score == 6
        assert shared.first_favorited is False
        assert shared.second_favorited is True
        assert [e.title for e in result.only_first] == ["Ran"]
        assert [e.title for e in result.only_second] == ["Alien"]

    def test_rewatches_collapse_to_best_score(self) -> None:
        a = _diary(
            DiaryEntry(media_id="1", title="Heat", score=6),
            DiaryEntry(media_id="1", title="Heat", score=10, favorited=True),
        )
        b = _diary(DiaryEntry(media_id="1", title="Heat"))
        result = compare_diaries(a, b)

        assert len(result.shared) == 1
        assert result.shared[0].first_score == 10
        assert result.shared[0].first_favorited is True
        assert result.shared[0].second_score is None

    def test_entries_without_id_ignored(self) -> None:
        a = _diary(DiaryEntry(title="Mystery"))
        b = _diary(DiaryEntry(title="Mystery"))
        result = compare_diaries(a, b)
        assert result.shared == []
        assert result.only_first == []
        assert result.only_second == []


class _TwoUsers:
    def __init__(self, failing: str | None = None) -> None:
        self.failing = failing

    async def __call__(self, url: str, headers: Mapping[str, str]) -> tuple[int, str]:
        if self.failing and f"/{self.failing}/" in url:
            return 404, ""
        user = url.split("/")[3]
        return 200, page_html([row_html(film_id="1")], name=user.title())


@pytest.mark.asyncio
async def test_fetch_pair() -> None:
    a, b = await fetch_pair("alice", "bob", fetch=_TwoUsers(), config=CONFIG)
    assert a.identity.display_name == "Alice"
    assert b.identity.display_name == "Bob"


@pytest.mark.asyncio
async def test_fetch_pair_names_failing_user() -> None:
    with pytest.raises(DiaryError, match="Error fetching bob"):
        await fetch_pair("alice", "bob", fetch=_TwoUsers(failing="bob"), config=CONFIG)
