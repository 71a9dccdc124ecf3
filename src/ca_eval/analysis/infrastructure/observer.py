"""Structlog implementation of the AnalysisObserver port."""

import structlog


class StructlogAnalysisObserver:
    """Delegates analysis domain events to structlog.

    Satisfies the AnalysisObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def analysis_started(self, num_messages: int, expect: str | None) -> None:
        self._log.debug("analysis.started", num_messages=num_messages, expect=expect)

    def analysis_completed(self, kind: str, duration_ms: int) -> None:
        self._log.info("analysis.completed", kind=kind, duration_ms=duration_ms)

    def analysis_failed(self, reason: str, timed_out: bool) -> None:
        self._log.error("analysis.failed", reason=reason, timed_out=timed_out)
