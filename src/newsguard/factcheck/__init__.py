from newsguard.factcheck.checker import IMAGE_FALLBACK_CLAIM, FactChecker, merge_unique
from newsguard.factcheck.options import FactCheckSettings, TextCheckOptions
from newsguard.factcheck.prompts import (
    FACT_CHECK_SYSTEM_PROMPT,
    NO_RESULTS_CONTEXT,
    render_search_context,
)

__all__ = [
    "FACT_CHECK_SYSTEM_PROMPT",
    "FactCheckSettings",
    "FactChecker",
    "IMAGE_FALLBACK_CLAIM",
    "NO_RESULTS_CONTEXT",
    "TextCheckOptions",
    "merge_unique",
    "render_search_context",
]
