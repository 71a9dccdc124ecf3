"""Builds the AnalysisResult variant from a raw ``/analyze`` payload.

The service may return per-message emotions under ``messages`` and a
compliance report under ``analysis``. The variant is picked once, here, so
nothing downstream has to inspect payload keys.
"""

from typing import Any

from pydantic import ValidationError

from ca_eval.analysis.domain.result import (
    AnalysisResult,
    ComplianceResult,
    ComplianceSummary,
    EmotionResult,
    MessageEmotion,
    ResultKind,
)
from ca_eval.analysis.infrastructure.errors import AnalysisFailure


def parse_analysis_result(
    payload: Any, expect: ResultKind | None = None
) -> AnalysisResult:
    """Return the EmotionResult or ComplianceResult carried by payload.

    With ``expect`` set, only that shape is accepted. Without it, a payload
    carrying a compliance summary is read as compliance, otherwise as emotion.

    Raises:
        AnalysisFailure: if the requested shape is absent or malformed.
    """
    if not isinstance(payload, dict):
        raise AnalysisFailure(reason="response payload is not an object")

    compliance = _compliance_section(payload)
    kind = expect
    if kind is None:
        kind = "compliance" if compliance is not None else "emotion"

    try:
        if kind == "compliance":
            if compliance is None:
                raise AnalysisFailure(reason="response has no compliance summary")
            return _build_compliance(section=compliance)
        messages = payload.get("messages")
        if not isinstance(messages, list) or not messages:
            raise AnalysisFailure(reason="response has no message emotions")
        return EmotionResult(
            messages=[MessageEmotion.model_validate(m) for m in messages]
        )
    except ValidationError as exc:
        raise AnalysisFailure(
            reason=f"malformed {kind} result ({exc.error_count()} error(s))"
        ) from exc


def _compliance_section(payload: dict[str, Any]) -> dict[str, Any] | None:
    """Locate the object holding compliance_summary, nested or top-level."""
    analysis = payload.get("analysis")
    if isinstance(analysis, dict) and "compliance_summary" in analysis:
        return analysis
    if "compliance_summary" in payload:
        return payload
    return None


def _build_compliance(section: dict[str, Any]) -> ComplianceResult:
    raw_summary = section.get("compliance_summary")
    if not isinstance(raw_summary, dict):
        raise AnalysisFailure(reason="compliance_summary is not an object")
    return ComplianceResult(
        compliance_summary=ComplianceSummary.from_raw(raw_summary),
        overall_compliance_score=section.get("overall_compliance_score"),
    )
