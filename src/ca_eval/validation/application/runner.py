"""ValidationRunner — turns the optional health endpoint into a never-failing call."""

from ca_eval.core.errors import CaEvalError
from ca_eval.validation.domain.metrics import (
    ValidationMetrics,
    ValidationUnavailable,
)
from ca_eval.validation.domain.observer import ValidationObserver
from ca_eval.validation.domain.source import ValidationSource


class ValidationRunner:
    """Invokes the validation endpoint, which is optional infrastructure.

    Any failure of the source comes back as ValidationUnavailable.
    """

    def __init__(self, source: ValidationSource, observer: ValidationObserver) -> None:
        self._source = source
        self._observer = observer

    async def validate(self) -> ValidationMetrics | ValidationUnavailable:
        self._observer.validation_started()
        try:
            metrics = await self._source.fetch()
        except CaEvalError as exc:
            self._observer.validation_unavailable(reason=str(exc))
            return ValidationUnavailable(detail=str(exc))
        except Exception as exc:  # noqa: BLE001
            reason = f"unexpected error: {exc}"
            self._observer.validation_unavailable(reason=reason)
            return ValidationUnavailable(detail=reason)

        self._observer.validation_completed(
            emotion_accuracy_pct=metrics.emotion_accuracy_pct,
            compliance_accuracy_pct=metrics.compliance_accuracy_pct,
            avg_response_time_ms=metrics.avg_response_time_ms,
        )
        return metrics
