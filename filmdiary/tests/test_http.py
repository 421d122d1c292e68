"""Tests for the HTTP helpers and configuration."""

from __future__ import annotations

import httpx
import pytest

from filmdiary.config import DEFAULT_ORIGIN, Config
from filmdiary.utils.http import DEFAULT_USER_AGENT, fetch_page


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("FILMDIARY_ORIGIN", "FILMDIARY_TIMEOUT", "FILMDIARY_USER_AGENT"):
        monkeypatch.delenv(key, raising=False)


class TestConfig:
    def test_defaults(self) -> None:
        config = Config.from_env()
        assert config.allowed_origin == DEFAULT_ORIGIN
        assert config.http_timeout == 30.0
        assert config.headers()["User-Agent"] == DEFAULT_USER_AGENT

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FILMDIARY_ORIGIN", "https://staging.example/")
        monkeypatch.setenv("FILMDIARY_TIMEOUT", "5")
        monkeypatch.setenv("FILMDIARY_USER_AGENT", "diary-bot/1.0")
        config = Config.from_env()
        assert config.allowed_origin == "https://staging.example/"
        assert config.http_timeout == 5.0
        assert config.headers()["User-Agent"] == "diary-bot/1.0"

    def test_blank_user_agent_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FILMDIARY_USER_AGENT", "")
        assert Config.from_env().user_agent == DEFAULT_USER_AGENT

    def test_blank_origin_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FILMDIARY_ORIGIN", "")
        assert Config.from_env().allowed_origin == DEFAULT_ORIGIN


@pytest.mark.asyncio
async def test_fetch_page_passes_headers_and_returns_status() -> None:
    seen: dict[str, str] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen.update(request.headers)
        return httpx.Response(200, text="<html>ok</html>")

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        status, text = await fetch_page(
            "https://letterboxd.com/bob/films/diary/", {"X-Probe": "1"}, client=client
        )

    assert status == 200
    assert text == "<html>ok</html>"
    assert seen["x-probe"] == "1"


@pytest.mark.asyncio
async def test_fetch_page_returns_error_status() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(503, text="busy"))
    async with httpx.AsyncClient(transport=transport) as client:
        status, text = await fetch_page("https://letterboxd.com/x/", {}, client=client)
    assert status == 503
    assert text == "busy"
