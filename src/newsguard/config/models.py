"""Pydantic configuration models for NewsGuard components."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from newsguard.factcheck.options import FactCheckSettings

# ============================================================
# Search Configs
# ============================================================


class SerperSearcherConfig(BaseModel):
    """Configuration for SerperSearcher."""

    type: Literal["serper"] = "serper"
    base_url: str = "https://google.serper.dev"
    timeout: float = Field(default=30.0, gt=0)

    model_config = {"frozen": True}


# ============================================================
# Completion Client Configs
# ============================================================


class OpenRouterClientConfig(BaseModel):
    """Configuration for OpenRouterClient.

    ``vision_model`` is used for image checks; if unset, ``model`` is.
    """

    type: Literal["openrouter"] = "openrouter"
    model: str = "deepseek/deepseek-chat-v3-0324:free"
    vision_model: str | None = None
    base_url: str = "https://openrouter.ai/api/v1"
    app_url: str = "http://localhost:3000"
    app_title: str = "NewsGuardAI"
    timeout: float = Field(default=60.0, gt=0)

    model_config = {"frozen": True}


class ClaudeClientConfig(BaseModel):
    """Configuration for ClaudeCompletionClient."""

    type: Literal["claude"] = "claude"
    model: str = "claude-haiku-4-5-20251001"
    vision_model: str | None = None

    model_config = {"frozen": True}


CompletionConfig = Annotated[
    OpenRouterClientConfig | ClaudeClientConfig,
    Field(discriminator="type"),
]


# ============================================================
# Scoring Config
# ============================================================


class ScoringConfig(BaseModel):
    """Numeric scores for qualitative confidence levels."""

    high: float = Field(default=0.9, ge=0, le=1)
    medium: float = Field(default=0.6, ge=0, le=1)
    low: float = Field(default=0.3, ge=0, le=1)
    opposing_label: float = Field(default=0.1, ge=0, le=1)

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for the analysis log."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class NewsGuardConfig(BaseModel):
    """Root configuration for NewsGuard."""

    search: SerperSearcherConfig = Field(default_factory=SerperSearcherConfig)
    completion: CompletionConfig = Field(default_factory=OpenRouterClientConfig)
    fact_check: FactCheckSettings = Field(default_factory=FactCheckSettings)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
