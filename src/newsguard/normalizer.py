"""Validation and normalization of raw model output into ``FactCheckResult``."""

import json
import logging

from newsguard.data import (
    ConfidenceLevel,
    FactCheckResult,
    Relevance,
    SourceCitation,
    Verdict,
    utc_timestamp,
)
from newsguard.url import is_well_formed_url

logger = logging.getLogger(__name__)

NO_EXPLANATION = "No explanation provided"


def degraded_result(claim: str, explanation: str) -> FactCheckResult:
    """Build the safe fallback result: unverifiable, low confidence, no sources."""
    return FactCheckResult(
        claim=claim,
        verdict=Verdict.UNVERIFIABLE,
        confidence=ConfidenceLevel.LOW,
        explanation=explanation,
        sources=(),
        timestamp=utc_timestamp(),
    )


def _strip_code_fence(text: str) -> str:
    cleaned = text.strip()
    if cleaned.startswith("```"):
        lines = [line for line in cleaned.split("\n") if not line.strip().startswith("```")]
        cleaned = "\n".join(lines).strip()
        # Closing fence on the same line as the payload
        if cleaned.endswith("```"):
            cleaned = cleaned[:-3].rstrip()
    return cleaned


def _parse_source(raw: dict[str, object]) -> SourceCitation:
    title = raw.get("title")
    url = raw.get("url")
    relevance_str = str(raw.get("relevance", "medium"))
    try:
        relevance = Relevance(relevance_str)
    except ValueError:
        relevance = Relevance.MEDIUM

    return SourceCitation(
        title=title if isinstance(title, str) and title.strip() else "Unknown source",
        url=url if is_well_formed_url(url) else "#",  # type: ignore[arg-type]
        relevance=relevance,
    )


def _parse_sources(raw: object) -> tuple[SourceCitation, ...]:
    if not isinstance(raw, list):
        return ()
    sources: list[SourceCitation] = []
    for item in raw:
        if isinstance(item, dict):
            sources.append(_parse_source(item))
        else:
            logger.debug("Dropping non-object source entry: %r", item)
    return tuple(sources)


def normalize(raw_output: str, fallback_claim: str) -> FactCheckResult:
    """Turn raw model output into a fully populated ``FactCheckResult``.

    Bad fields are coerced to safe defaults one at a time, so partial
    information from the model survives. An unrecognised verdict falls back
    to ``unverifiable`` with low confidence. This function never raises.

    Args:
        raw_output: Raw text returned by the language model.
        fallback_claim: Claim to report when the model gives none.

    Returns:
        The normalized result, stamped with the current time.
    """
    if not isinstance(raw_output, str):
        return degraded_result(fallback_claim, "Model returned no text output.")

    try:
        parsed = json.loads(_strip_code_fence(raw_output))
    except (ValueError, RecursionError) as e:
        logger.warning("Failed to parse model response as JSON: %s", e)
        return degraded_result(fallback_claim, f"Failed to parse model response as JSON: {e}")

    if not isinstance(parsed, dict):
        logger.warning("Model response is not a JSON object: %s", type(parsed).__name__)
        return degraded_result(
            fallback_claim,
            f"Model response was a JSON {type(parsed).__name__}, expected an object.",
        )

    try:
        verdict = Verdict(str(parsed.get("verdict")))
    except ValueError:
        verdict = Verdict.UNVERIFIABLE
        confidence = ConfidenceLevel.LOW
    else:
        try:
            confidence = ConfidenceLevel(str(parsed.get("confidence")))
        except ValueError:
            confidence = ConfidenceLevel.MEDIUM

    claim = parsed.get("claim")
    explanation = parsed.get("explanation")
    additional_context = parsed.get("additional_context")

    return FactCheckResult(
        claim=claim if isinstance(claim, str) and claim.strip() else fallback_claim,
        verdict=verdict,
        confidence=confidence,
        explanation=explanation if isinstance(explanation, str) else NO_EXPLANATION,
        sources=_parse_sources(parsed.get("sources")),
        additional_context=additional_context if isinstance(additional_context, str) else None,
        timestamp=utc_timestamp(),
    )
