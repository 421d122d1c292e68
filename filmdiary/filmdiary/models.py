"""Core data models for filmdiary."""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel, frozen=True, alias_generator=to_camel, populate_by_name=True):
    """Frozen model serialized with camelCase keys."""


class DiaryEntry(CamelModel):
    """A single logged film from a diary page."""

    media_id: str | None = None
    slug: str | None = None
    title: str = ""
    image_url: str | None = None
    logged_date: date | None = None
    score: int | None = None
    favorited: bool = False


class ProfileIdentity(CamelModel):
    """Who the diary belongs to."""

    display_name: str = ""
    # None means the caller should show a placeholder.
    avatar_url: str | None = None


class PageBundle(CamelModel):
    """Everything parsed out of one fetched diary page."""

    page_count: int = 0
    identity: ProfileIdentity = Field(default_factory=ProfileIdentity)
    entries: list[DiaryEntry] = Field(default_factory=list)


class DiaryResult(CamelModel):
    """Merged diary for one profile, page 1 entries first."""

    entries: list[DiaryEntry] = Field(default_factory=list)
    identity: ProfileIdentity = Field(default_factory=ProfileIdentity)

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
