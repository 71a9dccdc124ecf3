"""AnalysisResult — tagged variant over the emotion and compliance result shapes."""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

from ca_eval.analysis.domain.conversation import Sender

type ResultKind = Literal["emotion", "compliance"]

# Keys inside compliance_summary that describe emotion context rather than rules.
COMPLIANCE_CONTEXT_KEYS = frozenset({"customer_emotions", "negative_emotions_detected"})


class MessageEmotion(BaseModel, frozen=True):
    """Emotion classification of one message."""

    sender: Sender
    text: str
    emotion: str
    confidence: float = Field(ge=0.0, le=1.0)


class EmotionResult(BaseModel, frozen=True):
    kind: Literal["emotion"] = "emotion"
    messages: list[MessageEmotion] = Field(min_length=1)

    def top_message(self) -> MessageEmotion:
        """Return the classification that represents the conversation as a whole.

        Customer messages take precedence over agent messages; among them the
        most confident classification wins, earliest first on ties.
        """
        customer = [m for m in self.messages if m.sender == "customer"]
        candidates = customer or self.messages
        return max(candidates, key=lambda m: m.confidence)

    @property
    def top_emotion(self) -> str:
        return self.top_message().emotion

    @property
    def confidence(self) -> float:
        return self.top_message().confidence


class ComplianceSummary(BaseModel, frozen=True):
    """Per-rule pass/fail outcomes plus the emotion context they were judged in."""

    rules: dict[str, bool]
    customer_emotions: list[str] = []
    negative_emotions_detected: bool = False

    @classmethod
    def from_raw(cls, raw: dict[str, Any]) -> "ComplianceSummary":
        """Split a flat service summary into rule outcomes and emotion context."""
        return cls(
            rules={
                name: bool(passed)
                for name, passed in raw.items()
                if name not in COMPLIANCE_CONTEXT_KEYS
            },
            customer_emotions=raw.get("customer_emotions") or [],
            negative_emotions_detected=bool(
                raw.get("negative_emotions_detected", False)
            ),
        )

    def failed_rules(self) -> list[str]:
        return [name for name, passed in self.rules.items() if not passed]


class ComplianceResult(BaseModel, frozen=True):
    kind: Literal["compliance"] = "compliance"
    compliance_summary: ComplianceSummary
    overall_compliance_score: float = Field(ge=0.0, le=100.0)


type AnalysisResult = Annotated[
    EmotionResult | ComplianceResult,
    Field(discriminator="kind"),
]
