"""Google search through the Serper API."""

import logging
import os
from typing import Literal

import httpx
from pydantic import BaseModel, ValidationError, field_validator

from newsguard.data import SearchResultItem, SearchResultKind
from newsguard.errors import SearchUnavailable
from newsguard.url import extract_domain, is_well_formed_url

SERPER_BASE_URL = "https://google.serper.dev"
MAX_RESULTS = 10  # Serper page size

logger = logging.getLogger(__name__)


class _SerperItem(BaseModel):
    title: str
    link: str
    snippet: str | None = None
    source: str | None = None
    date: str | None = None

    @field_validator("link")
    @classmethod
    def link_must_be_url(cls, v: str) -> str:
        if not is_well_formed_url(v):
            raise ValueError(f"Malformed result link: {v!r}")
        return v


class _SerperResponse(BaseModel):
    organic: list[_SerperItem] | None = None
    news: list[_SerperItem] | None = None


class SerperSearcher:
    """Search Google news and web results using the Serper API.

    Args:
        api_key: Serper API key (defaults to SERPER_API_KEY env var).
        base_url: API base URL.
        timeout: Per-request timeout in seconds.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str = SERPER_BASE_URL,
        timeout: float = 30.0,
    ) -> None:
        self._api_key = api_key or os.environ.get("SERPER_API_KEY")
        if not self._api_key:
            raise ValueError("Serper API key required. Pass api_key or set SERPER_API_KEY env var.")
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    async def search_news(self, query: str, limit: int = 5) -> list[SearchResultItem]:
        return await self.search(query, kind="news", limit=limit)

    async def search_organic(self, query: str, limit: int = 5) -> list[SearchResultItem]:
        return await self.search(query, kind="organic", limit=limit)

    async def search(
        self,
        query: str,
        *,
        kind: Literal["news", "organic"] = "news",
        limit: int = 5,
    ) -> list[SearchResultItem]:
        """Run one search request.

        Args:
            query: Search query text (must not be blank).
            kind: ``"news"`` for news search, ``"organic"`` for web search.
            limit: Number of results to request, clamped to 1..10.

        Returns:
            Results in provider ranking order. A payload that does not match
            the expected schema yields an empty list.

        Raises:
            SearchUnavailable: On transport failure or a non-2xx response.
        """
        if not query or not query.strip():
            raise ValueError("Search query must not be empty")
        num = max(1, min(limit, MAX_RESULTS))

        payload: dict[str, str | int] = {"q": query, "num": num}
        if kind == "news":
            payload["tbm"] = "nws"

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    f"{self._base_url}/search",
                    json=payload,
                    headers={
                        "X-API-KEY": self._api_key,  # type: ignore[dict-item]
                        "Content-Type": "application/json",
                    },
                )
        except httpx.HTTPError as e:
            raise SearchUnavailable(f"Serper request failed: {e}") from e

        if not response.is_success:
            raise SearchUnavailable(
                f"Serper API error {response.status_code}: {response.text}",
                status_code=response.status_code,
            )

        try:
            parsed = _SerperResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning("Failed to parse Serper response for %r: %s", query, e)
            return []

        if kind == "news" and parsed.news:
            items, result_kind = parsed.news, SearchResultKind.NEWS
        else:
            items, result_kind = parsed.organic or [], SearchResultKind.ORGANIC

        return [_to_result_item(item, result_kind) for item in items[:num]]


def _to_result_item(item: _SerperItem, kind: SearchResultKind) -> SearchResultItem:
    source = item.source
    if not source and kind is SearchResultKind.ORGANIC:
        source = extract_domain(item.link)
    return SearchResultItem(
        title=item.title,
        link=item.link,
        snippet=item.snippet,
        source=source,
        date=item.date,
        kind=kind,
    )
