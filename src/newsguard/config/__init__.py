"""Configuration module for NewsGuard."""

from newsguard.config.factory import create_from_config
from newsguard.config.loader import get_default_config_path, load_config
from newsguard.config.models import (
    ClaudeClientConfig,
    CompletionConfig,
    LoggingConfig,
    NewsGuardConfig,
    OpenRouterClientConfig,
    ScoringConfig,
    SerperSearcherConfig,
)

__all__ = [
    "ClaudeClientConfig",
    "CompletionConfig",
    "LoggingConfig",
    "NewsGuardConfig",
    "OpenRouterClientConfig",
    "ScoringConfig",
    "SerperSearcherConfig",
    "create_from_config",
    "get_default_config_path",
    "load_config",
]
