"""AnalysisObserver port — domain events emitted around analysis requests."""

from typing import Protocol


class AnalysisObserver(Protocol):
    """Observer port for analysis domain events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def analysis_started(self, num_messages: int, expect: str | None) -> None: ...

    def analysis_completed(self, kind: str, duration_ms: int) -> None: ...

    def analysis_failed(self, reason: str, timed_out: bool) -> None: ...
