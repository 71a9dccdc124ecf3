"""Tests for HttpScenarioSource against a mocked HTTP transport."""

import httpx
import pytest

from ca_eval.scenario.domain.expectation import ScoreExpectation
from ca_eval.scenario.infrastructure.errors import CatalogUnavailable
from ca_eval.scenario.infrastructure.http_source import HttpScenarioSource
from tests.api.transport import json_handler, make_client
from tests.scenario.fake_observer import FakeCatalogObserver


class TestEmotionScenarios:
    async def test_entries_become_scenarios(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json={
                    "success": True,
                    "data": [
                        {
                            "id": "happy-1",
                            "name": "Happy customer",
                            "text": "This is wonderful!",
                            "expected": "joy",
                            "difficulty": "easy",
                        },
                        {"text": "Why is this so slow?", "expected": "anger"},
                    ],
                },
            )

        async with make_client(handler) as client:
            source = HttpScenarioSource(client=client, observer=FakeCatalogObserver())
            scenarios = await source.fetch(category="emotion")

        assert seen[0].url.path == "/api/testing/scenarios"
        assert seen[0].url.params["scenario_type"] == "emotion"
        assert [s.id for s in scenarios] == ["happy-1", "emotion-1"]
        assert scenarios[0].expected_emotion == "joy"
        assert scenarios[0].metadata == {"difficulty": "easy"}
        assert scenarios[1].name == "Emotion scenario 2"

    async def test_malformed_entries_are_skipped(self) -> None:
        observer = FakeCatalogObserver()
        handler = json_handler(
            [
                {"id": "ok", "name": "Ok", "text": "Fine.", "expected": "joy"},
                {"id": "bad-label", "name": "Bad", "text": "Hm", "expected": "bored"},
                {"id": "no-text", "name": "Empty"},
                "not an object",
            ]
        )

        async with make_client(handler) as client:
            source = HttpScenarioSource(client=client, observer=observer)
            scenarios = await source.fetch(category="emotion")

        assert [s.id for s in scenarios] == ["ok"]
        assert [event["index"] for event in observer.skipped] == [1, 2, 3]


class TestComplianceScenarios:
    async def test_difficulty_uses_compliance_endpoint(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json=[
                    {
                        "id": "hard-1",
                        "name": "Escalation",
                        "conversation": {
                            "messages": [
                                {"sender": "agent", "text": "Hello"},
                                {"sender": "customer", "text": "I'm furious"},
                            ]
                        },
                        "expectedScore": "> 70",
                    }
                ],
            )

        async with make_client(handler) as client:
            source = HttpScenarioSource(client=client, observer=FakeCatalogObserver())
            scenarios = await source.fetch(category="compliance", difficulty="hard")

        assert seen[0].url.path == "/api/testing/compliance"
        assert seen[0].url.params["difficulty"] == "hard"
        assert scenarios[0].expected_score == ScoreExpectation(
            comparison=">", threshold=70
        )
        assert scenarios[0].conversation is not None

    async def test_bad_score_expression_is_skipped(self) -> None:
        observer = FakeCatalogObserver()
        handler = json_handler(
            [
                {
                    "id": "odd",
                    "name": "Odd",
                    "conversation": {"messages": [{"sender": "agent", "text": "Hi"}]},
                    "expectedScore": "very high",
                }
            ]
        )

        async with make_client(handler) as client:
            source = HttpScenarioSource(client=client, observer=observer)
            scenarios = await source.fetch(category="compliance")

        assert scenarios == []
        assert len(observer.skipped) == 1

    async def test_numeric_score_is_reported_and_skipped(self) -> None:
        observer = FakeCatalogObserver()
        handler = json_handler(
            [
                {
                    "id": "numeric",
                    "name": "Numeric",
                    "conversation": {"messages": [{"sender": "agent", "text": "Hi"}]},
                    "expectedScore": 90,
                }
            ]
        )

        async with make_client(handler) as client:
            source = HttpScenarioSource(client=client, observer=observer)
            scenarios = await source.fetch(category="compliance")

        assert scenarios == []
        assert observer.skipped == [
            {
                "category": "compliance",
                "index": 0,
                "reason": "expected score is not a comparison expression: 90",
            }
        ]


class TestUnavailable:
    async def test_error_status_raises_catalog_unavailable(self) -> None:
        async with make_client(json_handler({}, status_code=500)) as client:
            source = HttpScenarioSource(client=client, observer=FakeCatalogObserver())
            with pytest.raises(CatalogUnavailable) as exc_info:
                await source.fetch(category="emotion")

        assert exc_info.value.reason == "Server error occurred"

    async def test_non_list_payload_raises_catalog_unavailable(self) -> None:
        async with make_client(json_handler({"data": {"items": []}})) as client:
            source = HttpScenarioSource(client=client, observer=FakeCatalogObserver())
            with pytest.raises(CatalogUnavailable, match="not a list"):
                await source.fetch(category="emotion")
