"""Error types raised by validation infrastructure."""

from ca_eval.core.errors import CaEvalError


class ValidationSourceError(CaEvalError):
    """Raised when the validation endpoint fails or returns an unreadable body."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to fetch validation metrics: {reason}")
