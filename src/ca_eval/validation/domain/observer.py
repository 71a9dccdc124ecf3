"""Observer port for the validation domain."""

from typing import Protocol


class ValidationObserver(Protocol):
    def validation_started(self) -> None: ...

    def validation_completed(
        self,
        emotion_accuracy_pct: float,
        compliance_accuracy_pct: float,
        avg_response_time_ms: float,
    ) -> None: ...

    def validation_unavailable(self, reason: str) -> None: ...
