"""Plain-text report lines for records, batch summaries and validation outcomes."""

from ca_eval.analysis.domain.result import ComplianceResult, EmotionResult
from ca_eval.run.domain.batch import BatchRun
from ca_eval.run.domain.record import ErrorEnvelope, RunRecord
from ca_eval.run.domain.summary import BatchSummary, ComplianceBatchSummary
from ca_eval.scenario.domain.scenario import Scenario
from ca_eval.validation.domain.metrics import ValidationMetrics, ValidationUnavailable


def _rule_title(rule: str) -> str:
    """``greeting_used`` -> ``Greeting Used``."""
    return rule.replace("_", " ").title()


def _verdict(flag: bool | None, yes: str, no: str) -> str:
    if flag is None:
        return ""
    return yes if flag else no


def scenario_lines(scenarios: list[Scenario]) -> list[str]:
    lines: list[str] = []
    for scenario in scenarios:
        expected = (
            "" if scenario.expected is None else f"  expected: {scenario.expected}"
        )
        lines.append(f"{scenario.id:<28} {scenario.name}{expected}")
    return lines


def record_lines(record: RunRecord) -> list[str]:
    """Describe one RunRecord; an error replaces the whole result."""
    result = record.result
    header = f"{record.name}"
    if isinstance(result, ErrorEnvelope):
        return [header, f"  Error: {result.message}"]

    lines = [header]
    if isinstance(result, EmotionResult):
        for message in result.messages:
            lines.append(
                f"  {message.sender.upper():<8} {message.emotion:<9}"
                f" {round(message.confidence * 100):>3}%  \"{message.text}\""
            )
        if record.expected is not None:
            verdict = _verdict(record.correct, "Correct", "Incorrect")
            lines.append(f"  Expected: {record.expected}  {verdict}")
    elif isinstance(result, ComplianceResult):
        summary = result.compliance_summary
        for rule, passed in summary.rules.items():
            lines.append(f"  {_rule_title(rule):<32} {'PASS' if passed else 'FAIL'}")
        failed = summary.failed_rules()
        if failed:
            lines.append(
                "  Failed rules: " + ", ".join(_rule_title(rule) for rule in failed)
            )
        if summary.customer_emotions:
            lines.append(
                "  Customer emotions: " + ", ".join(summary.customer_emotions)
            )
        if summary.negative_emotions_detected:
            lines.append(
                "  Negative emotions detected - agent responses evaluated strictly"
            )
        score_line = f"  Overall compliance score: {result.overall_compliance_score:g}%"
        if record.expected_score is not None:
            verdict = _verdict(record.expectation_met, "met", "not met")
            score_line += f"  (expected {record.expected_score}, {verdict})"
        lines.append(score_line)
    return lines


def batch_lines(batch: BatchRun) -> list[str]:
    if batch.error is not None:
        return [f"Error: {batch.error}"]
    lines: list[str] = []
    for record in batch.records:
        if record.is_error:
            lines.append(f"  ERROR      {record.name}: {record.error_message}")
        elif record.correct is not None:
            mark = "CORRECT" if record.correct else "INCORRECT"
            got = (
                record.result.top_emotion
                if isinstance(record.result, EmotionResult)
                else "-"
            )
            lines.append(
                f"  {mark:<10} {record.name}: expected {record.expected}, got {got}"
            )
        elif isinstance(record.result, ComplianceResult):
            verdict = _verdict(record.expectation_met, "MET", "NOT MET") or "SCORED"
            lines.append(
                f"  {verdict:<10} {record.name}:"
                f" {record.result.overall_compliance_score:g}%"
            )
        else:
            lines.append(f"  DONE       {record.name}")
    return lines


def summary_lines(summary: BatchSummary) -> list[str]:
    lines = [
        f"Correct predictions: {summary.correct_count}/{summary.scored_count}"
        f"  (errored: {summary.error_count} of {summary.total})",
        f"Accuracy rate:       {summary.accuracy_pct}%",
        f"Avg confidence:      {summary.avg_confidence_pct}%",
        "Accuracy by emotion:",
    ]
    for label, stats in summary.per_category.items():
        lines.append(
            f"  {label:<9} {stats.accuracy_pct:>3}%  ({stats.correct}/{stats.total})"
        )
    return lines


def compliance_summary_lines(summary: ComplianceBatchSummary) -> list[str]:
    return [
        f"Expectations met: {summary.met_count}/{summary.checked_count}"
        f"  ({summary.met_pct}%)",
        f"Average score:    {summary.avg_score:g}%",
        f"Errored:          {summary.error_count} of {summary.total}",
    ]


def validation_lines(outcome: ValidationMetrics | ValidationUnavailable) -> list[str]:
    if isinstance(outcome, ValidationUnavailable):
        lines = [f"Note: {outcome.reason}"]
        if outcome.detail:
            lines.append(f"  {outcome.detail}")
        return lines
    return [
        f"Emotion accuracy:    {outcome.emotion_accuracy_pct:g}%",
        f"Compliance accuracy: {outcome.compliance_accuracy_pct:g}%",
        f"Avg response time:   {outcome.avg_response_time_ms:g}ms",
    ]
