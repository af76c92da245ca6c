"""NewsGuard: search-grounded fact-checking of text and images with language models."""

from newsguard.analysis_log import (
    AnalysisLogEntry,
    AnalysisLogger,
    AnalysisLogSink,
    build_log_entry,
    save_analysis_safely,
)
from newsguard.config import NewsGuardConfig, create_from_config, load_config
from newsguard.data import (
    DEFAULT_CONFIDENCE_SCALE,
    AnalysisKind,
    ConfidenceLevel,
    ConfidenceScale,
    FactCheckResult,
    Reference,
    Relevance,
    SearchResultItem,
    SearchResultKind,
    SourceCitation,
    Verdict,
)
from newsguard.errors import (
    CompletionFailed,
    InvalidRequestError,
    NewsGuardError,
    SearchUnavailable,
)
from newsguard.factcheck import FactChecker, FactCheckSettings, TextCheckOptions
from newsguard.llm import (
    ChatMessage,
    ClaudeCompletionClient,
    CompletionClient,
    ImagePart,
    OpenRouterClient,
    TextPart,
)
from newsguard.normalizer import degraded_result, normalize
from newsguard.query import QueryExtractor, SentenceQueryExtractor, extract_queries
from newsguard.search import Searcher, SerperSearcher
from newsguard.url import extract_domain

__all__ = [
    # Models
    "AnalysisKind",
    "ConfidenceLevel",
    "ConfidenceScale",
    "DEFAULT_CONFIDENCE_SCALE",
    "FactCheckResult",
    "Reference",
    "Relevance",
    "SearchResultItem",
    "SearchResultKind",
    "SourceCitation",
    "Verdict",
    # Errors
    "CompletionFailed",
    "InvalidRequestError",
    "NewsGuardError",
    "SearchUnavailable",
    # Protocols
    "AnalysisLogSink",
    "CompletionClient",
    "QueryExtractor",
    "Searcher",
    # Messages
    "ChatMessage",
    "ImagePart",
    "TextPart",
    # Query Extraction
    "SentenceQueryExtractor",
    "extract_queries",
    # Searchers
    "SerperSearcher",
    # Completion Clients
    "ClaudeCompletionClient",
    "OpenRouterClient",
    # Normalization
    "degraded_result",
    "normalize",
    # Orchestration
    "FactCheckSettings",
    "FactChecker",
    "TextCheckOptions",
    # Logging
    "AnalysisLogEntry",
    "AnalysisLogger",
    "build_log_entry",
    "save_analysis_safely",
    # Config
    "NewsGuardConfig",
    "create_from_config",
    "load_config",
    # Functions
    "extract_domain",
]
