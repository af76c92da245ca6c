"""Factory functions to create components from configuration."""

from pathlib import Path

from newsguard.analysis_log import AnalysisLogger
from newsguard.config.models import (
    ClaudeClientConfig,
    CompletionConfig,
    NewsGuardConfig,
    OpenRouterClientConfig,
    ScoringConfig,
    SerperSearcherConfig,
)
from newsguard.data import ConfidenceScale
from newsguard.factcheck import FactChecker
from newsguard.llm import ClaudeCompletionClient, CompletionClient, OpenRouterClient
from newsguard.search import SerperSearcher


def create_searcher(config: SerperSearcherConfig) -> SerperSearcher:
    """Create a searcher from config."""
    if isinstance(config, SerperSearcherConfig):
        return SerperSearcher(base_url=config.base_url, timeout=config.timeout)
    msg = f"Unknown searcher config type: {type(config)}"
    raise ValueError(msg)


def create_completion_client(
    config: CompletionConfig,
    *,
    model: str | None = None,
) -> CompletionClient:
    """Create a completion client from config.

    Args:
        config: Completion client config.
        model: Overrides ``config.model`` (used for the vision client).
    """
    if isinstance(config, OpenRouterClientConfig):
        return OpenRouterClient(
            model=model or config.model,
            base_url=config.base_url,
            app_url=config.app_url,
            app_title=config.app_title,
            timeout=config.timeout,
        )
    if isinstance(config, ClaudeClientConfig):
        return ClaudeCompletionClient(model=model or config.model)
    msg = f"Unknown completion config type: {type(config)}"
    raise ValueError(msg)


def create_scale(config: ScoringConfig) -> ConfidenceScale:
    return ConfidenceScale(
        high=config.high,
        medium=config.medium,
        low=config.low,
        opposing_label=config.opposing_label,
    )


def create_checker(config: NewsGuardConfig) -> FactChecker:
    """Create a fact checker with all of its clients from config."""
    completion = create_completion_client(config.completion)
    vision: CompletionClient | None = None
    if config.completion.vision_model and config.completion.vision_model != config.completion.model:
        vision = create_completion_client(config.completion, model=config.completion.vision_model)

    return FactChecker(
        searcher=create_searcher(config.search),
        completion=completion,
        vision=vision,
        settings=config.fact_check,
    )


def create_from_config(
    config: NewsGuardConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> tuple[FactChecker, AnalysisLogger | None, ConfidenceScale]:
    """Create a fact checker and analysis log from root config.

    Args:
        config: Root configuration.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.

    Returns:
        Tuple of (checker, analysis_logger, confidence_scale).
        analysis_logger is None if logging is disabled.

    Raises:
        ValueError: If a required API key is missing.
    """
    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)
    scale = create_scale(config.scoring)

    analysis_logger: AnalysisLogger | None = None
    if log_enabled:
        analysis_logger = AnalysisLogger(log_dir=log_dir, enabled=True, scale=scale)

    checker = create_checker(config)
    return (checker, analysis_logger, scale)
