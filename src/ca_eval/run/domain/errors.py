"""Error types raised by the run executor."""

from ca_eval.core.errors import CaEvalError


class EmptyInput(CaEvalError):
    """Raised when a quick test is requested for blank text; nothing is dispatched."""

    def __init__(self) -> None:
        super().__init__("Failed to start quick test: text is empty")


class UnknownBuiltinScenario(CaEvalError):
    """Raised when a built-in compliance scenario is requested by a bad position."""

    def __init__(self, index: int, count: int) -> None:
        self.index = index
        self.count = count
        super().__init__(
            f"Failed to start compliance test: no built-in scenario at index {index}"
            f" (expected 0 to {count - 1})"
        )
