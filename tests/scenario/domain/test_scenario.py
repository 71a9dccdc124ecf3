"""Tests for the Scenario value object."""

import pytest
from pydantic import ValidationError

from ca_eval.analysis.domain.conversation import Conversation, Message
from ca_eval.scenario.domain.builtin import (
    BUILTIN_COMPLIANCE_SCENARIOS,
    EMOTION_HANDLING,
    PERFECT_COMPLIANCE,
    POOR_COMPLIANCE,
)
from ca_eval.scenario.domain.expectation import ScoreExpectation
from ca_eval.scenario.domain.scenario import Scenario


def _make_conversation() -> Conversation:
    return Conversation(
        messages=[
            Message(sender="agent", text="Hello, how can I help?"),
            Message(sender="customer", text="My bill is wrong."),
        ]
    )


class TestScenarioInput:
    def test_text_scenario_builds_single_message_conversation(self) -> None:
        scenario = Scenario(
            id="e1",
            name="Scared",
            category="emotion",
            text="I'm afraid I lost my data",
            expected="fear",
        )

        conversation = scenario.to_conversation()

        assert len(conversation.messages) == 1
        assert conversation.messages[0].sender == "customer"
        assert scenario.expected_emotion == "fear"
        assert scenario.expected_score is None

    def test_conversation_scenario_returns_it_unchanged(self) -> None:
        conversation = _make_conversation()
        scenario = Scenario(
            id="c1",
            name="Billing",
            category="compliance",
            conversation=conversation,
            expected=ScoreExpectation.parse("> 50"),
        )

        assert scenario.to_conversation() == conversation
        assert scenario.expected_emotion is None
        assert scenario.expected_score == ScoreExpectation.parse("> 50")

    def test_needs_text_or_conversation(self) -> None:
        with pytest.raises(ValidationError):
            Scenario(id="x", name="x", category="emotion")

    def test_rejects_both_text_and_conversation(self) -> None:
        with pytest.raises(ValidationError):
            Scenario(
                id="x",
                name="x",
                category="compliance",
                text="hi",
                conversation=_make_conversation(),
            )

    def test_emotion_scenario_cannot_expect_score(self) -> None:
        with pytest.raises(ValidationError):
            Scenario(
                id="x",
                name="x",
                category="emotion",
                text="hi",
                expected=ScoreExpectation.parse("> 90"),
            )

    def test_unknown_expected_label_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Scenario(id="x", name="x", category="emotion", text="hi", expected="bored")


class TestBuiltinScenarios:
    def test_three_builtins_in_order(self) -> None:
        assert BUILTIN_COMPLIANCE_SCENARIOS == (
            PERFECT_COMPLIANCE,
            POOR_COMPLIANCE,
            EMOTION_HANDLING,
        )

    def test_builtins_are_multi_turn_compliance_conversations(self) -> None:
        for scenario in BUILTIN_COMPLIANCE_SCENARIOS:
            assert scenario.category == "compliance"
            assert scenario.conversation is not None
            senders = {m.sender for m in scenario.conversation.messages}
            assert senders == {"agent", "customer"}
            assert scenario.metadata == {"builtin": True}

    def test_expected_score_ranges(self) -> None:
        assert str(PERFECT_COMPLIANCE.expected_score) == "> 90"
        assert str(POOR_COMPLIANCE.expected_score) == "< 30"
        assert str(EMOTION_HANDLING.expected_score) == "> 80"

    def test_ids_are_unique(self) -> None:
        ids = [scenario.id for scenario in BUILTIN_COMPLIANCE_SCENARIOS]

        assert len(set(ids)) == len(ids)
