"""Tests for SerperSearcher."""

from typing import Any

import httpx
import pytest

from newsguard.data import SearchResultItem, SearchResultKind
from newsguard.errors import SearchUnavailable
from newsguard.search.serper import SerperSearcher

SEARCH_URL = "https://google.serper.dev/search"


def _response(status_code: int = 200, **kwargs: Any) -> httpx.Response:
    return httpx.Response(status_code, request=httpx.Request("POST", SEARCH_URL), **kwargs)


@pytest.fixture
def mock_response_data() -> dict[str, Any]:
    """Sample Serper response with news and organic sections."""
    return {
        "searchParameters": {"q": "test query", "type": "news", "num": 5},
        "news": [
            {
                "title": "News 1",
                "link": "https://news.example.com/1",
                "snippet": "First snippet",
                "source": "Example News",
                "date": "2 hours ago",
            },
            {
                "title": "News 2",
                "link": "https://news.example.com/2",
            },
        ],
        "organic": [
            {
                "title": "Organic 1",
                "link": "https://www.organic.example.org/page",
                "snippet": "Organic snippet",
            },
        ],
    }


@pytest.fixture
def searcher() -> SerperSearcher:
    """Create a searcher with test API key."""
    return SerperSearcher(api_key="test-key")


def _patch_post(monkeypatch: pytest.MonkeyPatch, response: httpx.Response) -> dict[str, Any]:
    captured: dict[str, Any] = {}

    async def mock_post(self: httpx.AsyncClient, url: str, **kwargs: Any) -> httpx.Response:
        captured["url"] = url
        captured.update(kwargs)
        return response

    monkeypatch.setattr(httpx.AsyncClient, "post", mock_post)
    return captured


def test_init_requires_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    """Should raise if no API key provided."""
    monkeypatch.delenv("SERPER_API_KEY", raising=False)
    with pytest.raises(ValueError, match="API key required"):
        SerperSearcher()


def test_init_uses_env_var(monkeypatch: pytest.MonkeyPatch) -> None:
    """Should use SERPER_API_KEY env var if no key passed."""
    monkeypatch.setenv("SERPER_API_KEY", "env-key")
    searcher = SerperSearcher()
    assert searcher._api_key == "env-key"


async def test_search_news_returns_news_items(
    searcher: SerperSearcher,
    mock_response_data: dict[str, Any],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _patch_post(monkeypatch, _response(json=mock_response_data))

    results = await searcher.search_news("test query")

    assert len(results) == 2
    assert all(isinstance(r, SearchResultItem) for r in results)
    assert results[0].title == "News 1"
    assert results[0].link == "https://news.example.com/1"
    assert results[0].snippet == "First snippet"
    assert results[0].source == "Example News"
    assert results[0].kind == SearchResultKind.NEWS
    assert results[1].snippet is None


async def test_search_news_sends_expected_request(
    searcher: SerperSearcher,
    mock_response_data: dict[str, Any],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    captured = _patch_post(monkeypatch, _response(json=mock_response_data))

    await searcher.search_news("test query", limit=4)

    assert captured["url"] == SEARCH_URL
    assert captured["json"] == {"q": "test query", "num": 4, "tbm": "nws"}
    assert captured["headers"]["X-API-KEY"] == "test-key"


async def test_search_organic_omits_news_flag(
    searcher: SerperSearcher,
    mock_response_data: dict[str, Any],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    captured = _patch_post(monkeypatch, _response(json=mock_response_data))

    results = await searcher.search_organic("test query")

    assert "tbm" not in captured["json"]
    assert [r.title for r in results] == ["Organic 1"]
    assert results[0].kind == SearchResultKind.ORGANIC
    assert results[0].source == "organic.example.org"


async def test_limit_is_clamped(
    searcher: SerperSearcher,
    mock_response_data: dict[str, Any],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    captured = _patch_post(monkeypatch, _response(json=mock_response_data))

    await searcher.search_news("test query", limit=50)
    assert captured["json"]["num"] == 10

    await searcher.search_news("test query", limit=0)
    assert captured["json"]["num"] == 1


async def test_news_falls_back_to_organic(
    searcher: SerperSearcher,
    mock_response_data: dict[str, Any],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    mock_response_data["news"] = []
    _patch_post(monkeypatch, _response(json=mock_response_data))

    results = await searcher.search_news("test query")

    assert [r.title for r in results] == ["Organic 1"]


async def test_empty_query_rejected(searcher: SerperSearcher) -> None:
    with pytest.raises(ValueError, match="must not be empty"):
        await searcher.search_news("   ")


async def test_non_2xx_raises_search_unavailable(
    searcher: SerperSearcher,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _patch_post(monkeypatch, _response(403, text="Unauthorized"))

    with pytest.raises(SearchUnavailable, match="403") as exc_info:
        await searcher.search_news("test query")
    assert exc_info.value.status_code == 403


async def test_transport_error_raises_search_unavailable(
    searcher: SerperSearcher,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    async def mock_post(self: httpx.AsyncClient, url: str, **kwargs: Any) -> httpx.Response:
        raise httpx.ConnectError("connection refused")

    monkeypatch.setattr(httpx.AsyncClient, "post", mock_post)

    with pytest.raises(SearchUnavailable, match="connection refused"):
        await searcher.search_news("test query")


async def test_malformed_item_yields_empty_list(
    searcher: SerperSearcher,
    mock_response_data: dict[str, Any],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    mock_response_data["news"][1]["link"] = "not a url"
    _patch_post(monkeypatch, _response(json=mock_response_data))

    assert await searcher.search_news("test query") == []


async def test_wrong_section_type_yields_empty_list(
    searcher: SerperSearcher,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _patch_post(monkeypatch, _response(json={"news": "oops"}))

    assert await searcher.search_news("test query") == []


async def test_non_json_body_yields_empty_list(
    searcher: SerperSearcher,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _patch_post(monkeypatch, _response(text="<html>maintenance</html>"))

    assert await searcher.search_news("test query") == []


async def test_missing_sections_yield_empty_list(
    searcher: SerperSearcher,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _patch_post(monkeypatch, _response(json={"searchParameters": {"q": "x"}}))

    assert await searcher.search_news("test query") == []
