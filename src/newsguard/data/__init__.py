"""Data models for NewsGuard."""

from newsguard.data.models import (
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
    utc_timestamp,
)

__all__ = [
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
    "utc_timestamp",
]
