"""Converts server-side batch entries into RunRecords."""

from pydantic import ValidationError

from ca_eval.analysis.domain.result import (
    ComplianceResult,
    ComplianceSummary,
    EmotionResult,
    MessageEmotion,
)
from ca_eval.run.domain.record import ErrorEnvelope, RunRecord
from ca_eval.run.domain.remote_batch import RemoteBatchEntry, RemoteBatchKind
from ca_eval.scenario.domain.expectation import ScoreExpectation


def to_record(entry: RemoteBatchEntry, kind: RemoteBatchKind) -> RunRecord:
    """Build the RunRecord for one remote entry.

    Correctness is recomputed locally from ``result`` and ``expected`` so that
    remote and local batches are judged the same way. An entry whose
    fields cannot form a result becomes an error record.
    """
    try:
        if kind == "emotions":
            return _emotion_record(entry=entry)
        return _compliance_record(entry=entry)
    except ValidationError as exc:
        return _error_record(
            entry=entry,
            message=f"malformed {kind} entry ({exc.error_count()} error(s))",
        )


def _error_record(
    entry: RemoteBatchEntry,
    message: str,
    expected: str | None = None,
    expected_score: ScoreExpectation | None = None,
) -> RunRecord:
    return RunRecord(
        kind="remote_batch",
        name=entry.name,
        result=ErrorEnvelope(message=message, error_type="RemoteBatchEntryError"),
        expected=expected,
        expected_score=expected_score,
    )


def _emotion_record(entry: RemoteBatchEntry) -> RunRecord:
    if entry.error is not None:
        return _error_record(entry=entry, message=entry.error, expected=entry.expected)
    if entry.result is None or entry.confidence is None:
        return _error_record(
            entry=entry,
            message="entry has no predicted emotion",
            expected=entry.expected,
        )
    result = EmotionResult(
        messages=[
            MessageEmotion(
                sender="customer",
                text=entry.text or "",
                emotion=entry.result,
                confidence=entry.confidence,
            )
        ]
    )
    return RunRecord.from_result(
        kind="remote_batch",
        name=entry.name,
        result=result,
        expected=entry.expected,
    )


def _compliance_record(entry: RemoteBatchEntry) -> RunRecord:
    expected_score: ScoreExpectation | None = None
    if entry.expected is not None:
        try:
            expected_score = ScoreExpectation.parse(entry.expected)
        except ValueError:
            expected_score = None

    if entry.error is not None:
        return _error_record(
            entry=entry, message=entry.error, expected_score=expected_score
        )
    if entry.score is None:
        return _error_record(
            entry=entry,
            message="entry has no compliance score",
            expected_score=expected_score,
        )
    return RunRecord.from_result(
        kind="remote_batch",
        name=entry.name,
        result=ComplianceResult(
            compliance_summary=ComplianceSummary.from_raw(
                dict(entry.compliance_summary or {})
            ),
            overall_compliance_score=entry.score,
        ),
        expected_score=expected_score,
    )
