"""Observer port for the run domain — defines events in domain language."""

from typing import Protocol


class RunObserver(Protocol):
    """Observer port emitting structured events while tests are dispatched.

    Implementations may log to structlog, render progress, or record for tests.
    """

    def run_started(self, kind: str, name: str) -> None: ...

    def run_completed(
        self, kind: str, name: str, errored: bool, correct: bool | None
    ) -> None: ...

    def run_rejected(self, kind: str) -> None: ...

    def run_item_failed(self, kind: str, name: str, reason: str) -> None: ...

    def batch_started(self, run_id: str, total: int, max_concurrent: int) -> None: ...

    def batch_item_completed(
        self, run_id: str, index: int, name: str, errored: bool
    ) -> None: ...

    def batch_completed(
        self, run_id: str, total: int, error_count: int, elapsed_seconds: float
    ) -> None: ...
