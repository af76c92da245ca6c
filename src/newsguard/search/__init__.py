from newsguard.search.base import Searcher
from newsguard.search.serper import SerperSearcher

__all__ = [
    "Searcher",
    "SerperSearcher",
]
