from typing import Protocol

from newsguard.data import SearchResultItem


class Searcher(Protocol):
    """Interface for a web/news search provider.

    Implementations make a single attempt per call and raise
    ``SearchUnavailable`` on transport failure; callers decide whether that
    is fatal.
    """

    async def search_news(self, query: str, limit: int = 5) -> list[SearchResultItem]:
        """Search for news results, most relevant first."""
        ...

    async def search_organic(self, query: str, limit: int = 5) -> list[SearchResultItem]:
        """Search for organic web results, most relevant first."""
        ...
