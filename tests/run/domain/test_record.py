"""Tests for RunRecord construction."""

import pytest
from pydantic import ValidationError

from ca_eval.analysis.infrastructure.errors import AnalysisFailure
from ca_eval.run.domain.record import ErrorEnvelope, RunRecord
from ca_eval.scenario.domain.expectation import ScoreExpectation
from tests.analysis.results import compliance_result, emotion_result


class TestFromResult:
    def test_emotion_with_expected_sets_correct(self) -> None:
        record = RunRecord.from_result(
            kind="scenario",
            name="s",
            result=emotion_result(emotion="sadness", confidence=0.7),
            expected="sadness",
        )

        assert record.correct is True
        assert record.confidence == pytest.approx(0.7)
        assert record.expectation_met is None

    def test_emotion_without_expected_leaves_correct_unset(self) -> None:
        record = RunRecord.from_result(
            kind="quick", name="q", result=emotion_result()
        )

        assert record.correct is None

    def test_compliance_with_expectation_sets_expectation_met(self) -> None:
        record = RunRecord.from_result(
            kind="compliance",
            name="c",
            result=compliance_result(score=25),
            expected_score=ScoreExpectation.parse("< 30"),
        )

        assert record.expectation_met is True
        assert record.correct is None
        assert record.confidence is None


class TestFromError:
    def test_error_envelope_carries_message_and_type(self) -> None:
        record = RunRecord.from_error(
            kind="quick", name="q", error=AnalysisFailure(reason="Resource not found")
        )

        assert record.is_error
        assert isinstance(record.result, ErrorEnvelope)
        assert record.result.error_type == "AnalysisFailure"
        assert record.error_message is not None
        assert "Resource not found" in record.error_message
        assert record.correct is None


class TestImmutability:
    def test_record_is_frozen(self) -> None:
        record = RunRecord.from_result(kind="quick", name="q", result=emotion_result())

        with pytest.raises(ValidationError):
            record.name = "changed"  # type: ignore[misc]

    def test_successful_record_is_not_error(self) -> None:
        record = RunRecord.from_result(kind="quick", name="q", result=emotion_result())

        assert record.is_error is False
        assert record.error_message is None
