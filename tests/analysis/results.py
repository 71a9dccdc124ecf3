"""Builders for AnalysisResult values shared across tests."""

from ca_eval.analysis.domain.result import (
    ComplianceResult,
    ComplianceSummary,
    EmotionResult,
    MessageEmotion,
)


def emotion_result(
    emotion: str = "joy", confidence: float = 0.9, text: str = "Hello"
) -> EmotionResult:
    return EmotionResult(
        messages=[
            MessageEmotion(
                sender="customer", text=text, emotion=emotion, confidence=confidence
            )
        ]
    )


def compliance_result(
    score: float = 95.0, rules: dict[str, bool] | None = None
) -> ComplianceResult:
    return ComplianceResult(
        compliance_summary=ComplianceSummary(
            rules=rules if rules is not None else {"greeting_used": True},
            customer_emotions=["anger", "joy"],
            negative_emotions_detected=True,
        ),
        overall_compliance_score=score,
    )
