from newsguard.query.base import QueryExtractor
from newsguard.query.sentences import SentenceQueryExtractor, extract_queries

__all__ = [
    "QueryExtractor",
    "SentenceQueryExtractor",
    "extract_queries",
]
