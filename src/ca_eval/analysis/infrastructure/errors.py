"""Error types raised by the analysis client adapter."""

from ca_eval.core.errors import CaEvalError


class AnalysisFailure(CaEvalError):
    """Raised when the analysis request fails or its response cannot be read."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to analyze conversation: {reason}")


class AnalysisTimeout(AnalysisFailure):
    """Raised when the analysis service does not answer within the transport bound."""

    def __init__(self, timeout_seconds: float) -> None:
        self.timeout_seconds = timeout_seconds
        super().__init__(reason=f"timed out after {timeout_seconds:g}s")
