"""Error types raised by the analysis API client."""

from ca_eval.core.errors import CaEvalError


class ApiRequestError(CaEvalError):
    """Raised when a request to the analysis API fails or returns an error status."""

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Failed to call analysis API: {reason}")


class ApiTimeoutError(ApiRequestError):
    """Raised when the analysis API does not answer within the configured timeout."""

    def __init__(self, timeout_seconds: float) -> None:
        self.timeout_seconds = timeout_seconds
        super().__init__(reason=f"no response within {timeout_seconds:g}s")
