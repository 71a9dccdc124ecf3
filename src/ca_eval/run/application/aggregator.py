"""Aggregator — pure reductions of RunRecords into batch statistics."""

import math
import statistics
from collections.abc import Sequence

from ca_eval.analysis.domain.emotion import EMOTION_LABELS
from ca_eval.analysis.domain.result import ComplianceResult, EmotionResult
from ca_eval.run.domain.record import RunRecord
from ca_eval.run.domain.summary import (
    BatchSummary,
    CategoryStats,
    ComplianceBatchSummary,
)


def _percent(numerator: float, denominator: int) -> int:
    """Return 100 * numerator / denominator rounded half up; 0 when denominator is 0."""
    if denominator == 0:
        return 0
    return math.floor(100 * numerator / denominator + 0.5)


def _is_scored(record: RunRecord) -> bool:
    return isinstance(record.result, EmotionResult) and record.expected is not None


def summarize(records: Sequence[RunRecord]) -> BatchSummary:
    """Reduce emotion RunRecords into a BatchSummary.

    Errored records count towards ``total`` and ``error_count`` only. Every
    known emotion label appears in ``per_category``, with 0% accuracy when no
    record expected it. The result depends on nothing but ``records``.
    """
    scored = [r for r in records if _is_scored(r)]
    correct_count = sum(1 for r in scored if r.correct)
    confidences = [r.confidence for r in scored if r.confidence is not None]

    labels = list(EMOTION_LABELS)
    # Labels the service is not known for still get their own row.
    for record in scored:
        if record.expected not in labels:
            labels.append(record.expected)

    per_category: dict[str, CategoryStats] = {}
    for label in labels:
        subset = [r for r in scored if r.expected == label]
        subset_correct = sum(1 for r in subset if r.correct)
        per_category[label] = CategoryStats(
            correct=subset_correct,
            total=len(subset),
            accuracy_pct=_percent(subset_correct, len(subset)),
        )

    return BatchSummary(
        total=len(records),
        scored_count=len(scored),
        correct_count=correct_count,
        error_count=sum(1 for r in records if r.is_error),
        accuracy_pct=_percent(correct_count, len(scored)),
        avg_confidence_pct=_percent(sum(confidences), len(confidences)),
        per_category=per_category,
    )


def summarize_compliance(records: Sequence[RunRecord]) -> ComplianceBatchSummary:
    """Reduce compliance RunRecords into pass-rate and mean-score statistics."""
    scores = [
        r.result.overall_compliance_score
        for r in records
        if isinstance(r.result, ComplianceResult)
    ]
    checked = [r for r in records if r.expectation_met is not None]
    met_count = sum(1 for r in checked if r.expectation_met)

    return ComplianceBatchSummary(
        total=len(records),
        error_count=sum(1 for r in records if r.is_error),
        checked_count=len(checked),
        met_count=met_count,
        met_pct=_percent(met_count, len(checked)),
        avg_score=round(statistics.mean(scores), 1) if scores else 0.0,
    )
