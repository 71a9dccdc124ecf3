"""CompositeRunObserver — fans out all events to a list of observers."""

from ca_eval.run.domain.observer import RunObserver


class CompositeRunObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from RunObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[RunObserver]) -> None:
        self._observers = observers

    def run_started(self, kind: str, name: str) -> None:
        for obs in self._observers:
            obs.run_started(kind=kind, name=name)

    def run_completed(
        self, kind: str, name: str, errored: bool, correct: bool | None
    ) -> None:
        for obs in self._observers:
            obs.run_completed(kind=kind, name=name, errored=errored, correct=correct)

    def run_rejected(self, kind: str) -> None:
        for obs in self._observers:
            obs.run_rejected(kind=kind)

    def run_item_failed(self, kind: str, name: str, reason: str) -> None:
        for obs in self._observers:
            obs.run_item_failed(kind=kind, name=name, reason=reason)

    def batch_started(self, run_id: str, total: int, max_concurrent: int) -> None:
        for obs in self._observers:
            obs.batch_started(run_id=run_id, total=total, max_concurrent=max_concurrent)

    def batch_item_completed(
        self, run_id: str, index: int, name: str, errored: bool
    ) -> None:
        for obs in self._observers:
            obs.batch_item_completed(
                run_id=run_id, index=index, name=name, errored=errored
            )

    def batch_completed(
        self, run_id: str, total: int, error_count: int, elapsed_seconds: float
    ) -> None:
        for obs in self._observers:
            obs.batch_completed(
                run_id=run_id,
                total=total,
                error_count=error_count,
                elapsed_seconds=elapsed_seconds,
            )
