"""Structlog implementation of the ValidationObserver port."""

import structlog


class StructlogValidationObserver:
    """Delegates validation events to structlog.

    Satisfies the ValidationObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def validation_started(self) -> None:
        self._log.info("validation.started")

    def validation_completed(
        self,
        emotion_accuracy_pct: float,
        compliance_accuracy_pct: float,
        avg_response_time_ms: float,
    ) -> None:
        self._log.info(
            "validation.completed",
            emotion_accuracy_pct=emotion_accuracy_pct,
            compliance_accuracy_pct=compliance_accuracy_pct,
            avg_response_time_ms=avg_response_time_ms,
        )

    def validation_unavailable(self, reason: str) -> None:
        self._log.warning("validation.unavailable", reason=reason)
