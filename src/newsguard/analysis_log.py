"""Analysis log: one JSON record per completed fact-check."""

import dataclasses
import logging
import uuid
from pathlib import Path
from typing import Any, Protocol

from pydantic import BaseModel

from newsguard.data import (
    DEFAULT_CONFIDENCE_SCALE,
    AnalysisKind,
    ConfidenceScale,
    FactCheckResult,
    utc_timestamp,
)

logger = logging.getLogger(__name__)


class AnalysisLogEntry(BaseModel):
    """Record of a single fact-check, as persisted by the log sink."""

    id: str
    timestamp: str
    user_id: str
    analysis_type: AnalysisKind
    input: str
    label: str
    confidence: float
    all_scores: dict[str, float]
    references: list[dict[str, Any]] = []
    extracted_text: str | None = None

    model_config = {"frozen": True}


def build_log_entry(
    user_id: str,
    analysis_type: AnalysisKind,
    input_payload: str,
    result: FactCheckResult,
    *,
    extracted_text: str | None = None,
    scale: ConfidenceScale = DEFAULT_CONFIDENCE_SCALE,
) -> AnalysisLogEntry:
    """Derive the persisted fields from a result.

    Image entries carry the extracted text; when none is given, the result's
    ``additional_context`` is used.
    """
    if analysis_type is AnalysisKind.IMAGE and extracted_text is None:
        extracted_text = result.additional_context or ""
    return AnalysisLogEntry(
        id=str(uuid.uuid4()),
        timestamp=utc_timestamp(),
        user_id=user_id,
        analysis_type=analysis_type,
        input=input_payload,
        label=result.verdict.value,
        confidence=scale.score(result.confidence),
        all_scores=scale.all_scores(result.verdict, result.confidence),
        references=[dataclasses.asdict(r) for r in result.references],
        extracted_text=extracted_text if analysis_type is AnalysisKind.IMAGE else None,
    )


class AnalysisLogSink(Protocol):
    """Interface for persisting fact-check results."""

    def save(
        self,
        user_id: str | None,
        analysis_type: AnalysisKind,
        input_payload: str,
        result: FactCheckResult,
        *,
        extracted_text: str | None = None,
    ) -> str | None:
        """Persist one analysis.

        Returns:
            The new entry id, or None if nothing was saved.
        """
        ...


class AnalysisLogger:
    """Writes one JSON file per analysis into a log directory.

    When ``enabled=False``, ``save`` is a no-op.

    Args:
        log_dir: Directory to write JSON log files.
        enabled: If False, nothing is written.
        scale: Confidence scale used for numeric scores.
    """

    def __init__(
        self,
        log_dir: Path,
        *,
        enabled: bool = True,
        scale: ConfidenceScale = DEFAULT_CONFIDENCE_SCALE,
    ) -> None:
        self._log_dir = log_dir
        self._enabled = enabled
        self._scale = scale
        self._last_log_path: Path | None = None

    @property
    def enabled(self) -> bool:
        """Whether logging is active."""
        return self._enabled

    @property
    def last_log_path(self) -> Path | None:
        """Path to the last written log file, or None."""
        return self._last_log_path

    def save(
        self,
        user_id: str | None,
        analysis_type: AnalysisKind,
        input_payload: str,
        result: FactCheckResult,
        *,
        extracted_text: str | None = None,
    ) -> str | None:
        if not self._enabled:
            return None
        if not user_id:
            logger.warning("Skipping analysis log save: no user id provided")
            return None

        entry = build_log_entry(
            user_id,
            analysis_type,
            input_payload,
            result,
            extracted_text=extracted_text,
            scale=self._scale,
        )

        self._log_dir.mkdir(parents=True, exist_ok=True)

        # analysis_2026-02-12T14-30-00_<id>.json (colons -> dashes)
        ts = entry.timestamp.replace(":", "-").split(".")[0].split("+")[0]
        filepath = self._log_dir / f"analysis_{ts}_{entry.id}.json"
        filepath.write_text(entry.model_dump_json(indent=2))
        self._last_log_path = filepath

        logger.info("Analysis log entry %s saved for user %s", entry.id, user_id)
        return entry.id


def save_analysis_safely(
    sink: AnalysisLogSink | None,
    user_id: str | None,
    analysis_type: AnalysisKind,
    input_payload: str,
    result: FactCheckResult,
    *,
    extracted_text: str | None = None,
) -> str | None:
    """Save an analysis without ever letting a sink failure reach the caller."""
    if sink is None:
        return None
    try:
        return sink.save(
            user_id,
            analysis_type,
            input_payload,
            result,
            extracted_text=extracted_text,
        )
    except Exception:
        logger.exception("Error saving analysis log")
        return None
