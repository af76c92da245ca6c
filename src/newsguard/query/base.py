from typing import Protocol


class QueryExtractor(Protocol):
    """Interface for deriving search queries from free text."""

    def extract(self, text: str) -> list[str]: ...
