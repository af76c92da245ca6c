"""Pydantic models for fact-check settings and per-request options."""

from pydantic import BaseModel, Field


class FactCheckSettings(BaseModel):
    """Process-wide defaults for the fact-check orchestrator."""

    max_results: int = Field(default=5, ge=1, le=10)
    temperature: float = Field(default=0.2, ge=0, le=2)
    max_tokens: int = Field(default=2000, ge=1, le=4000)
    ocr_temperature: float = Field(default=0.1, ge=0, le=2)
    ocr_max_tokens: int = Field(default=2000, ge=1, le=4000)
    image_search_results: int = Field(default=3, ge=1, le=10)

    model_config = {"frozen": True}


class TextCheckOptions(BaseModel):
    """Per-request options for ``FactChecker.check_text``.

    Unset fields fall back to the checker's ``FactCheckSettings``.
    """

    search_query: str | None = None
    max_results: int | None = Field(default=None, ge=1, le=10)
    temperature: float | None = Field(default=None, ge=0, le=2)
    max_tokens: int | None = Field(default=None, ge=1, le=4000)

    model_config = {"frozen": True}
