"""Sentence-based query extraction."""

import re

_SENTENCE_END = re.compile(r"[.!?]+")


def extract_queries(text: str, *, max_queries: int = 3) -> list[str]:
    """Split text on sentence-ending punctuation and keep the leading sentences.

    Args:
        text: Free text to derive queries from.
        max_queries: Maximum number of sentences to return.

    Returns:
        Up to ``max_queries`` trimmed, non-empty sentences in original order.
    """
    if not isinstance(text, str):
        return []
    sentences = (s.strip() for s in _SENTENCE_END.split(text))
    return [s for s in sentences if s][:max_queries]


class SentenceQueryExtractor:
    """Query extractor that uses the first few sentences of the text as queries.

    A cheap, explainable heuristic; no API calls are made. Swap in another
    ``QueryExtractor`` for entity- or claim-aware extraction.

    Args:
        max_queries: Maximum number of queries to return (default 3).
    """

    def __init__(self, max_queries: int = 3) -> None:
        self._max_queries = max_queries

    def extract(self, text: str) -> list[str]:
        return extract_queries(text, max_queries=self._max_queries)
