"""Tests for ValidationRunner and HttpValidationSource."""

import pytest

from ca_eval.validation.application.runner import ValidationRunner
from ca_eval.validation.domain.metrics import (
    DEFAULT_UNAVAILABLE_REASON,
    ValidationMetrics,
    ValidationUnavailable,
)
from ca_eval.validation.infrastructure.errors import ValidationSourceError
from ca_eval.validation.infrastructure.http_source import HttpValidationSource
from tests.api.transport import json_handler, make_client
from tests.validation.fake_observer import FakeValidationObserver
from tests.validation.fake_source import FakeValidationSource


def _make_metrics() -> ValidationMetrics:
    return ValidationMetrics(
        emotion_accuracy_pct=91.5,
        compliance_accuracy_pct=87,
        avg_response_time_ms=320,
    )


class TestValidationRunner:
    async def test_metrics_are_returned(self) -> None:
        observer = FakeValidationObserver()
        runner = ValidationRunner(
            source=FakeValidationSource(metrics=_make_metrics()), observer=observer
        )

        outcome = await runner.validate()

        assert outcome == _make_metrics()
        assert observer.started == 1
        assert observer.completed[0]["emotion_accuracy_pct"] == 91.5

    async def test_source_error_becomes_unavailable(self) -> None:
        observer = FakeValidationObserver()
        runner = ValidationRunner(
            source=FakeValidationSource(
                error=ValidationSourceError(reason="Resource not found")
            ),
            observer=observer,
        )

        outcome = await runner.validate()

        assert isinstance(outcome, ValidationUnavailable)
        assert outcome.reason == DEFAULT_UNAVAILABLE_REASON
        assert outcome.detail is not None
        assert "Resource not found" in outcome.detail
        assert len(observer.unavailable) == 1

    async def test_unexpected_error_becomes_unavailable(self) -> None:
        runner = ValidationRunner(
            source=FakeValidationSource(error=KeyError("emotionAccuracy")),
            observer=FakeValidationObserver(),
        )

        outcome = await runner.validate()

        assert isinstance(outcome, ValidationUnavailable)


class TestHttpValidationSource:
    async def test_reads_service_metric_names(self) -> None:
        handler = json_handler(
            {
                "success": True,
                "data": {
                    "emotionAccuracy": 92,
                    "complianceAccuracy": 85.5,
                    "averageResponseTime": 240,
                },
            }
        )

        async with make_client(handler) as client:
            metrics = await HttpValidationSource(client=client).fetch()

        assert metrics.emotion_accuracy_pct == 92
        assert metrics.compliance_accuracy_pct == 85.5
        assert metrics.avg_response_time_ms == 240

    async def test_missing_endpoint_raises_source_error(self) -> None:
        async with make_client(json_handler({}, status_code=404)) as client:
            with pytest.raises(ValidationSourceError, match="Resource not found"):
                await HttpValidationSource(client=client).fetch()

    async def test_malformed_metrics_raise_source_error(self) -> None:
        async with make_client(json_handler({"emotionAccuracy": "high"})) as client:
            with pytest.raises(ValidationSourceError, match="malformed metrics"):
                await HttpValidationSource(client=client).fetch()
