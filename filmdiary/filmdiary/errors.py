"""Exceptions raised by filmdiary."""

from __future__ import annotations


class DiaryError(Exception):
    """A diary could not be produced; ``str(err)`` is user-facing."""


class InvalidProfileURLError(DiaryError, ValueError):
    """The profile URL is outside the allowed origin."""


class DiaryFetchError(DiaryError):
    """A diary page could not be fetched."""
