"""RunRecord — the outcome of dispatching one scenario or free-text input."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from ca_eval.analysis.domain.result import (
    AnalysisResult,
    ComplianceResult,
    EmotionResult,
)
from ca_eval.scenario.domain.expectation import ScoreExpectation
from ca_eval.scenario.domain.scenario import Scenario

type RunKind = Literal["quick", "scenario", "compliance", "batch", "remote_batch"]


class ErrorEnvelope(BaseModel, frozen=True):
    """In-band failure value standing in for an AnalysisResult."""

    kind: Literal["error"] = "error"
    message: str
    error_type: str


type RecordOutcome = Annotated[
    EmotionResult | ComplianceResult | ErrorEnvelope,
    Field(discriminator="kind"),
]


class RunRecord(BaseModel, frozen=True):
    """Immutable record of one dispatched test.

    ``correct`` is only set for emotion results with an expected label, and
    ``expectation_met`` only for compliance results with a ScoreExpectation.
    Both stay None for errored records.
    """

    kind: RunKind
    name: str
    scenario: Scenario | None = None
    result: RecordOutcome
    expected: str | None = None
    expected_score: ScoreExpectation | None = None
    correct: bool | None = None
    confidence: float | None = None
    expectation_met: bool | None = None

    @classmethod
    def from_result(
        cls,
        kind: RunKind,
        name: str,
        result: AnalysisResult,
        scenario: Scenario | None = None,
        expected: str | None = None,
        expected_score: ScoreExpectation | None = None,
    ) -> "RunRecord":
        """Pair a successful result with its correctness against the expectation."""
        correct: bool | None = None
        confidence: float | None = None
        expectation_met: bool | None = None
        if isinstance(result, EmotionResult):
            confidence = result.confidence
            if expected is not None:
                correct = result.top_emotion == expected
        elif expected_score is not None:
            expectation_met = expected_score.is_met_by(result.overall_compliance_score)

        return cls(
            kind=kind,
            name=name,
            scenario=scenario,
            result=result,
            expected=expected,
            expected_score=expected_score,
            correct=correct,
            confidence=confidence,
            expectation_met=expectation_met,
        )

    @classmethod
    def from_error(
        cls,
        kind: RunKind,
        name: str,
        error: Exception,
        scenario: Scenario | None = None,
        expected: str | None = None,
        expected_score: ScoreExpectation | None = None,
    ) -> "RunRecord":
        return cls(
            kind=kind,
            name=name,
            scenario=scenario,
            result=ErrorEnvelope(message=str(error), error_type=type(error).__name__),
            expected=expected,
            expected_score=expected_score,
        )

    @property
    def is_error(self) -> bool:
        return isinstance(self.result, ErrorEnvelope)

    @property
    def error_message(self) -> str | None:
        return self.result.message if isinstance(self.result, ErrorEnvelope) else None
