"""Tests for model output normalization."""

import dataclasses
import json
from typing import Any

import pytest

from newsguard.data import ConfidenceLevel, FactCheckResult, Relevance, SourceCitation, Verdict
from newsguard.normalizer import NO_EXPLANATION, degraded_result, normalize


def _valid_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "claim": "X",
        "verdict": "true",
        "confidence": "high",
        "explanation": "Because of Y.",
        "sources": [{"title": "S", "url": "https://s.example", "relevance": "high"}],
    }
    payload.update(overrides)
    return payload


def _without_timestamp(result: FactCheckResult) -> dict[str, Any]:
    data = dataclasses.asdict(result)
    data.pop("timestamp")
    return data


def _assert_degraded(result: FactCheckResult, claim: str) -> None:
    assert result.claim == claim
    assert result.verdict == Verdict.UNVERIFIABLE
    assert result.confidence == ConfidenceLevel.LOW
    assert result.sources == ()
    assert result.explanation
    assert result.timestamp


def test_valid_payload() -> None:
    result = normalize(json.dumps(_valid_payload(additional_context="ctx")), "fallback")

    assert result.claim == "X"
    assert result.verdict == Verdict.TRUE
    assert result.confidence == ConfidenceLevel.HIGH
    assert result.explanation == "Because of Y."
    assert result.sources == (
        SourceCitation(title="S", url="https://s.example", relevance=Relevance.HIGH),
    )
    assert result.additional_context == "ctx"


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "not json",
        "{",
        "[1, 2, 3]",
        '"just a string"',
        "42",
        "null",
        "[" * 100_000,
        "1" * 5000,
        '{"verdict": "true", "x": ' + "9" * 5000 + "}",
    ],
)
def test_unusable_output_is_degraded(raw: str) -> None:
    _assert_degraded(normalize(raw, "fallback"), "fallback")


def test_parse_failure_is_explained() -> None:
    result = normalize("not json", "fallback")
    assert "Failed to parse" in result.explanation


def test_non_string_output_is_degraded() -> None:
    _assert_degraded(normalize(None, "fallback"), "fallback")  # type: ignore[arg-type]


def test_empty_object_gets_defaults() -> None:
    result = normalize("{}", "fallback")

    assert result.claim == "fallback"
    assert result.verdict == Verdict.UNVERIFIABLE
    assert result.confidence == ConfidenceLevel.LOW
    assert result.explanation == NO_EXPLANATION
    assert result.sources == ()
    assert result.additional_context is None


def test_strips_markdown_fence() -> None:
    raw = "```json\n" + json.dumps(_valid_payload()) + "\n```"
    assert normalize(raw, "fallback").verdict == Verdict.TRUE


def test_strips_fence_closed_on_payload_line() -> None:
    raw = "```json\n" + json.dumps(_valid_payload()) + "```"
    assert normalize(raw, "fallback").verdict == Verdict.TRUE


def test_invalid_verdict_falls_back_to_unverifiable_low() -> None:
    result = normalize(json.dumps(_valid_payload(verdict="probably")), "fallback")
    assert result.verdict == Verdict.UNVERIFIABLE
    assert result.confidence == ConfidenceLevel.LOW
    # Partial information is preserved
    assert result.explanation == "Because of Y."
    assert len(result.sources) == 1


def test_invalid_confidence_becomes_medium() -> None:
    result = normalize(json.dumps(_valid_payload(confidence="very high")), "fallback")
    assert result.verdict == Verdict.TRUE
    assert result.confidence == ConfidenceLevel.MEDIUM


@pytest.mark.parametrize("claim", [None, 7, "", "   ", ["X"]])
def test_bad_claim_uses_fallback(claim: Any) -> None:
    assert normalize(json.dumps(_valid_payload(claim=claim)), "fallback").claim == "fallback"


def test_non_string_explanation() -> None:
    result = normalize(json.dumps(_valid_payload(explanation={"a": 1})), "fallback")
    assert result.explanation == NO_EXPLANATION


@pytest.mark.parametrize("sources", [None, "https://s.example", {"title": "S"}, 3])
def test_malformed_sources_become_empty(sources: Any) -> None:
    assert normalize(json.dumps(_valid_payload(sources=sources)), "fallback").sources == ()


def test_source_field_coercion() -> None:
    sources = [
        {"title": "Good", "url": "https://good.example/a", "relevance": "low"},
        {"url": "ftp://files.example"},
        {"title": 5, "url": "not a url", "relevance": "critical"},
        {},
        "dropped",
    ]
    result = normalize(json.dumps(_valid_payload(sources=sources)), "fallback")

    assert result.sources == (
        SourceCitation(title="Good", url="https://good.example/a", relevance=Relevance.LOW),
        SourceCitation(title="Unknown source", url="#", relevance=Relevance.MEDIUM),
        SourceCitation(title="Unknown source", url="#", relevance=Relevance.MEDIUM),
        SourceCitation(title="Unknown source", url="#", relevance=Relevance.MEDIUM),
    )


def test_missing_relevance_defaults_to_medium() -> None:
    sources = [{"title": "S", "url": "https://s.example"}]
    result = normalize(json.dumps(_valid_payload(sources=sources)), "fallback")
    assert result.sources[0].relevance == Relevance.MEDIUM


def test_non_string_additional_context_dropped() -> None:
    result = normalize(json.dumps(_valid_payload(additional_context=["a"])), "fallback")
    assert result.additional_context is None


def test_model_timestamp_is_overwritten() -> None:
    raw = json.dumps(_valid_payload(timestamp="1999-01-01T00:00:00Z"))
    assert normalize(raw, "fallback").timestamp != "1999-01-01T00:00:00Z"


@pytest.mark.parametrize(
    "raw",
    [
        json.dumps(_valid_payload()),
        json.dumps(_valid_payload(verdict="nope", sources="x")),
        "not json",
        "[]",
        "{}",
    ],
)
def test_normalize_is_idempotent_apart_from_timestamp(raw: str) -> None:
    first = normalize(raw, "fallback")
    second = normalize(raw, "fallback")
    assert _without_timestamp(first) == _without_timestamp(second)


def test_degraded_result() -> None:
    result = degraded_result("claim", "went wrong")
    _assert_degraded(result, "claim")
    assert result.explanation == "went wrong"
