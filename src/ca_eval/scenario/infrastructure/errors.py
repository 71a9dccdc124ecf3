"""Error types raised by scenario infrastructure."""

from ca_eval.core.errors import CaEvalError


class CatalogUnavailable(CaEvalError):
    """Raised when the remote scenario catalog cannot be reached or read."""

    def __init__(self, category: str, reason: str) -> None:
        self.category = category
        self.reason = reason
        super().__init__(f"Failed to load {category} scenarios: {reason}")
