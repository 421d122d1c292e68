"""filmdiary — Letterboxd diary extraction."""

from filmdiary.compare import DiaryComparison, SharedFilm, compare_diaries, fetch_pair
from filmdiary.config import Config
from filmdiary.diary import diary_url, fetch_all_entries
from filmdiary.errors import DiaryError, DiaryFetchError, InvalidProfileURLError
from filmdiary.models import DiaryEntry, DiaryResult, PageBundle, ProfileIdentity
from filmdiary.parser import parse_page

__all__ = [
    "Config",
    "DiaryComparison",
    "DiaryEntry",
    "DiaryError",
    "DiaryFetchError",
    "DiaryResult",
    "InvalidProfileURLError",
    "PageBundle",
    "ProfileIdentity",
    "SharedFilm",
    "compare_diaries",
    "diary_url",
    "fetch_all_entries",
    "fetch_pair",
    "parse_page",
]
