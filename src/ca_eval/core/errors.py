"""Base exception class for all ca-eval-specific errors."""


class CaEvalError(Exception):
    """Base class for all ca-eval errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
