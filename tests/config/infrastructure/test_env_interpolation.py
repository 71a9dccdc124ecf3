"""Tests for recursive ${ENV_VAR} interpolation."""

import pytest

from ca_eval.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)


class TestCollectMissingVars:
    def test_walks_nested_lists_and_dicts(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("CA_EVAL_A", raising=False)
        monkeypatch.delenv("CA_EVAL_B", raising=False)
        data = {"x": ["${CA_EVAL_A}", {"y": "prefix-${CA_EVAL_B}"}], "z": 3}

        assert collect_missing_vars(data) == ["CA_EVAL_A", "CA_EVAL_B"]

    def test_reference_with_fallback_is_not_required(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("CA_EVAL_A", raising=False)

        assert collect_missing_vars({"x": "${CA_EVAL_A:-default}"}) == []

    def test_duplicates_reported_once(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CA_EVAL_A", raising=False)

        assert collect_missing_vars(["${CA_EVAL_A}", "${CA_EVAL_A}"]) == ["CA_EVAL_A"]


class TestInterpolate:
    def test_substitutes_inside_strings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CA_EVAL_HOST", "analyzer.test")

        result = interpolate({"url": "https://${CA_EVAL_HOST}/api", "n": 2})

        assert result == {"url": "https://analyzer.test/api", "n": 2}

    def test_set_var_wins_over_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CA_EVAL_HOST", "real")

        assert interpolate("${CA_EVAL_HOST:-fallback}") == "real"

    def test_empty_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CA_EVAL_HOST", raising=False)

        assert interpolate(["${CA_EVAL_HOST:-}"]) == [""]
