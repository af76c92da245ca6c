"""Core data models for NewsGuard."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any


class SearchResultKind(StrEnum):
    """Which section of a search response an item came from."""

    NEWS = "news"
    ORGANIC = "organic"
    KNOWLEDGE_GRAPH = "knowledge_graph"


class Verdict(StrEnum):
    """Outcome of a fact-check. ``UNVERIFIABLE`` is the fallback value."""

    TRUE = "true"
    FALSE = "false"
    MISLEADING = "misleading"
    UNVERIFIABLE = "unverifiable"


class ConfidenceLevel(StrEnum):
    """Qualitative confidence attached to a verdict."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Relevance(StrEnum):
    """How relevant a cited source is to the claim."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class AnalysisKind(StrEnum):
    """Kind of content an analysis was run on."""

    TEXT = "text"
    IMAGE = "image"


@dataclass(frozen=True)
class ConfidenceScale:
    """Numeric scores used wherever a ``ConfidenceLevel`` is surfaced as a number.

    ``opposing_label`` is the score given to the competing verdict labels
    when a result is expanded into per-label scores.
    """

    high: float = 0.9
    medium: float = 0.6
    low: float = 0.3
    opposing_label: float = 0.1

    def score(self, level: ConfidenceLevel) -> float:
        if level is ConfidenceLevel.HIGH:
            return self.high
        if level is ConfidenceLevel.MEDIUM:
            return self.medium
        return self.low

    def all_scores(self, verdict: Verdict, level: ConfidenceLevel) -> dict[str, float]:
        """Expand a verdict into per-label scores.

        The verdict keeps its confidence score and two competing labels get
        ``opposing_label``: ``false`` for a true verdict (``true``
        otherwise), and ``unverifiable`` for a misleading verdict
        (``misleading`` otherwise).
        """
        scores = {verdict.value: self.score(level)}
        opposing = Verdict.FALSE if verdict is Verdict.TRUE else Verdict.TRUE
        scores[opposing.value] = self.opposing_label
        hedge = Verdict.UNVERIFIABLE if verdict is Verdict.MISLEADING else Verdict.MISLEADING
        scores[hedge.value] = self.opposing_label
        return scores


DEFAULT_CONFIDENCE_SCALE = ConfidenceScale()


@dataclass(frozen=True)
class SearchResultItem:
    """A single ranked result returned by the search provider."""

    title: str
    link: str
    snippet: str | None = None
    source: str | None = None
    date: str | None = None
    kind: SearchResultKind = SearchResultKind.ORGANIC


@dataclass(frozen=True)
class SourceCitation:
    """A source the model cited for its verdict, after validation."""

    title: str = "Unknown source"
    url: str = "#"
    relevance: Relevance = Relevance.MEDIUM


@dataclass(frozen=True)
class Reference:
    """A cited source in the shape handed to the analysis log."""

    reason: str
    link: str | None = None
    source_title: str | None = None

    @classmethod
    def from_citation(cls, citation: SourceCitation) -> "Reference":
        return cls(
            reason=citation.title or "Source reference",
            link=citation.url,
            source_title=citation.title,
        )


def utc_timestamp() -> str:
    """Current time as an ISO-8601 UTC string."""
    return datetime.now(tz=UTC).isoformat()


@dataclass(frozen=True)
class FactCheckResult:
    """Final output of a fact-check.

    Every field has a default so that degraded results can always be built,
    even when nothing upstream succeeded.
    """

    claim: str
    verdict: Verdict = Verdict.UNVERIFIABLE
    confidence: ConfidenceLevel = ConfidenceLevel.LOW
    explanation: str = ""
    sources: tuple[SourceCitation, ...] = ()
    additional_context: str | None = None
    timestamp: str = field(default_factory=utc_timestamp)

    @property
    def references(self) -> tuple[Reference, ...]:
        return tuple(Reference.from_citation(s) for s in self.sources)

    @property
    def confidence_score(self) -> float:
        return DEFAULT_CONFIDENCE_SCALE.score(self.confidence)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON wire shape."""
        data: dict[str, Any] = {
            "claim": self.claim,
            "verdict": self.verdict.value,
            "confidence": self.confidence.value,
            "explanation": self.explanation,
            "sources": [
                {"title": s.title, "url": s.url, "relevance": s.relevance.value}
                for s in self.sources
            ],
            "timestamp": self.timestamp,
        }
        if self.additional_context is not None:
            data["additional_context"] = self.additional_context
        return data
