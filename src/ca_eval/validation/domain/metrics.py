"""ValidationMetrics and ValidationUnavailable — outcomes of a system validation."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_UNAVAILABLE_REASON = "Validation endpoint not available."


class ValidationMetrics(BaseModel, frozen=True):
    """Accuracy and latency figures reported by the service's validation endpoint."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: Literal["metrics"] = "metrics"
    emotion_accuracy_pct: float = Field(alias="emotionAccuracy", ge=0.0, le=100.0)
    compliance_accuracy_pct: float = Field(
        alias="complianceAccuracy", ge=0.0, le=100.0
    )
    avg_response_time_ms: float = Field(alias="averageResponseTime", ge=0.0)


class ValidationUnavailable(BaseModel, frozen=True):
    """Validation could not be run; reported as data, never raised."""

    kind: Literal["unavailable"] = "unavailable"
    reason: str = DEFAULT_UNAVAILABLE_REASON
    detail: str | None = None
