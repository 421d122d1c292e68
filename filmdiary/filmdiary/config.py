"""Configuration management for filmdiary."""

from __future__ import annotations

import os
from dataclasses import dataclass

from filmdiary.utils.http import DEFAULT_USER_AGENT, DIARY_HEADERS

DEFAULT_ORIGIN = "https://letterboxd.com/"


@dataclass(frozen=True)
class Config:
    """Global configuration."""

    allowed_origin: str = DEFAULT_ORIGIN
    http_timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> Config:
        return cls(
            allowed_origin=os.getenv("FILMDIARY_ORIGIN") or DEFAULT_ORIGIN,
            http_timeout=float(os.getenv("FILMDIARY_TIMEOUT", "30")),
            user_agent=os.getenv("FILMDIARY_USER_AGENT") or DEFAULT_USER_AGENT,
        )

    def headers(self) -> dict[str, str]:
        """Request headers sent with every diary page fetch."""
        return {**DIARY_HEADERS, "User-Agent": self.user_agent}
