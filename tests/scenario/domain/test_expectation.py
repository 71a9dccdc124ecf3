"""Tests for ScoreExpectation parsing and evaluation."""

import pytest

from ca_eval.scenario.domain.expectation import ScoreExpectation


class TestParse:
    @pytest.mark.parametrize(
        ("expression", "comparison", "threshold"),
        [
            ("> 90", ">", 90.0),
            ("<30", "<", 30.0),
            (">= 75.5", ">=", 75.5),
            ("<= 40%", "<=", 40.0),
            ("  == 100 ", "==", 100.0),
        ],
    )
    def test_valid_expressions(
        self, expression: str, comparison: str, threshold: float
    ) -> None:
        parsed = ScoreExpectation.parse(expression)

        assert parsed.comparison == comparison
        assert parsed.threshold == threshold

    @pytest.mark.parametrize("expression", ["", "90", "high", "> ninety", "=> 5"])
    def test_invalid_expressions(self, expression: str) -> None:
        with pytest.raises(ValueError):
            ScoreExpectation.parse(expression)


class TestIsMetBy:
    def test_strictly_greater(self) -> None:
        expectation = ScoreExpectation.parse("> 90")

        assert expectation.is_met_by(90.1)
        assert not expectation.is_met_by(90)

    def test_strictly_less(self) -> None:
        expectation = ScoreExpectation.parse("< 30")

        assert expectation.is_met_by(0)
        assert not expectation.is_met_by(30)

    def test_inclusive_bounds(self) -> None:
        assert ScoreExpectation.parse(">= 80").is_met_by(80)
        assert ScoreExpectation.parse("<= 80").is_met_by(80)


class TestStr:
    def test_renders_like_the_source_expression(self) -> None:
        assert str(ScoreExpectation.parse(">90")) == "> 90"
        assert str(ScoreExpectation.parse("<= 42.5%")) == "<= 42.5"
