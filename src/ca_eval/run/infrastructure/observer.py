"""StructlogRunObserver — production observer that delegates to structlog."""

import structlog


class StructlogRunObserver:
    """Logs run domain events to structlog.

    Does NOT inherit from RunObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def run_started(self, kind: str, name: str) -> None:
        self._log.info("run.started", kind=kind, name=name)

    def run_completed(
        self, kind: str, name: str, errored: bool, correct: bool | None
    ) -> None:
        self._log.info(
            "run.completed", kind=kind, name=name, errored=errored, correct=correct
        )

    def run_rejected(self, kind: str) -> None:
        self._log.warning(
            "run.rejected", kind=kind, reason="another run is in progress"
        )

    def run_item_failed(self, kind: str, name: str, reason: str) -> None:
        self._log.error("run.item_failed", kind=kind, name=name, reason=reason)

    def batch_started(self, run_id: str, total: int, max_concurrent: int) -> None:
        self._log.info(
            "run.batch.started",
            run_id=run_id,
            total=total,
            max_concurrent=max_concurrent,
        )

    def batch_item_completed(
        self, run_id: str, index: int, name: str, errored: bool
    ) -> None:
        self._log.debug(
            "run.batch.item_completed",
            run_id=run_id,
            index=index,
            name=name,
            errored=errored,
        )

    def batch_completed(
        self, run_id: str, total: int, error_count: int, elapsed_seconds: float
    ) -> None:
        self._log.info(
            "run.batch.completed",
            run_id=run_id,
            total=total,
            error_count=error_count,
            elapsed_seconds=round(elapsed_seconds, 2),
        )
