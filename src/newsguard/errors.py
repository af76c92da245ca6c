"""Exception types raised across NewsGuard components."""


class NewsGuardError(Exception):
    """Base class for NewsGuard errors."""


class InvalidRequestError(NewsGuardError, ValueError):
    """Input to a fact-check entry point failed its preconditions.

    This is the only error a ``FactChecker`` check raises to its caller;
    every upstream failure is folded into a degraded result instead.
    """


class SearchUnavailable(NewsGuardError):
    """The search provider could not be reached or answered with a non-2xx status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class CompletionFailed(NewsGuardError):
    """The language-model provider failed or returned an empty completion."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
