"""Scenario value object — one predefined test input with its expected outcome."""

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

from ca_eval.analysis.domain.conversation import Conversation
from ca_eval.analysis.domain.emotion import EmotionLabel
from ca_eval.scenario.domain.expectation import ScoreExpectation

type ScenarioCategory = Literal["emotion", "compliance"]


class Scenario(BaseModel, frozen=True):
    """Immutable test input.

    Emotion scenarios carry a single customer ``text`` and an expected emotion
    label. Compliance scenarios carry a pre-built multi-turn ``conversation``
    and usually a ScoreExpectation.
    """

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    category: ScenarioCategory
    text: str | None = None
    conversation: Conversation | None = None
    expected: EmotionLabel | ScoreExpectation | None = None
    customer_name: str | None = None
    agent_name: str | None = None
    metadata: dict[str, Any] = {}

    @model_validator(mode="after")
    def _check_input(self) -> "Scenario":
        if (self.text is None) == (self.conversation is None):
            raise ValueError("scenario needs exactly one of text or conversation")
        if self.category == "emotion" and isinstance(self.expected, ScoreExpectation):
            raise ValueError("emotion scenario cannot expect a compliance score")
        if self.category == "compliance" and isinstance(self.expected, str):
            raise ValueError("compliance scenario cannot expect an emotion label")
        return self

    @property
    def expected_emotion(self) -> str | None:
        return self.expected if isinstance(self.expected, str) else None

    @property
    def expected_score(self) -> ScoreExpectation | None:
        return self.expected if isinstance(self.expected, ScoreExpectation) else None

    def to_conversation(self) -> Conversation:
        """Build the request body: the pre-built conversation, or one customer turn."""
        if self.conversation is not None:
            return self.conversation
        assert self.text is not None
        return Conversation.from_customer_text(
            text=self.text,
            customer_name=self.customer_name,
            agent_name=self.agent_name,
        )
