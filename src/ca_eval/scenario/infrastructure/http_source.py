"""HttpScenarioSource — reads test scenarios from the analysis service."""

from typing import Any

from pydantic import ValidationError

from ca_eval.api.infrastructure.client import ApiClient
from ca_eval.api.infrastructure.errors import ApiRequestError
from ca_eval.scenario.domain.expectation import ScoreExpectation
from ca_eval.scenario.domain.observer import CatalogObserver
from ca_eval.scenario.domain.scenario import Scenario, ScenarioCategory
from ca_eval.scenario.infrastructure.errors import CatalogUnavailable

# Fields mapped onto Scenario attributes; anything else lands in metadata.
_KNOWN_FIELDS = frozenset(
    {
        "id",
        "name",
        "text",
        "conversation",
        "expected",
        "expectedScore",
        "customer_name",
        "agent_name",
    }
)


class HttpScenarioSource:
    """Fetches scenarios from ``/testing/scenarios`` and ``/testing/compliance``.

    Entries that cannot be turned into a Scenario are skipped and reported to
    the observer; the rest of the list is still returned.

    Satisfies the ScenarioSource protocol structurally.
    """

    def __init__(self, client: ApiClient, observer: CatalogObserver) -> None:
        self._client = client
        self._observer = observer

    async def fetch(
        self, category: ScenarioCategory, difficulty: str | None = None
    ) -> list[Scenario]:
        """
        Raises:
            CatalogUnavailable: if the request fails or the payload is not a list.
        """
        try:
            if category == "compliance" and difficulty is not None:
                payload = await self._client.get(
                    "/testing/compliance", params={"difficulty": difficulty}
                )
            else:
                payload = await self._client.get(
                    "/testing/scenarios", params={"scenario_type": category}
                )
        except ApiRequestError as exc:
            raise CatalogUnavailable(category=category, reason=exc.reason) from exc

        if not isinstance(payload, list):
            raise CatalogUnavailable(
                category=category, reason="scenario payload is not a list"
            )

        scenarios: list[Scenario] = []
        for index, entry in enumerate(payload):
            result = _parse_entry(entry=entry, category=category, index=index)
            if isinstance(result, str):
                self._observer.catalog_entry_skipped(
                    category=category, index=index, reason=result
                )
            else:
                scenarios.append(result)
        return scenarios


def _parse_entry(entry: Any, category: ScenarioCategory, index: int) -> Scenario | str:
    """
    Convert one raw catalog entry into a Scenario.

    Returns a Scenario on success, or an error string describing the problem.
    """
    if not isinstance(entry, dict):
        return "entry is not an object"

    expected: Any = entry.get("expected")
    if category == "compliance":
        raw_score = entry.get("expectedScore", expected)
        if raw_score is not None and not isinstance(raw_score, str):
            return f"expected score is not a comparison expression: {raw_score!r}"
        try:
            expected = (
                ScoreExpectation.parse(raw_score) if raw_score is not None else None
            )
        except ValueError as exc:
            return str(exc)

    try:
        return Scenario(
            id=str(entry.get("id") or f"{category}-{index}"),
            name=entry.get("name") or f"{category.title()} scenario {index + 1}",
            category=category,
            text=entry.get("text"),
            conversation=entry.get("conversation"),
            expected=expected,
            customer_name=entry.get("customer_name"),
            agent_name=entry.get("agent_name"),
            metadata={k: v for k, v in entry.items() if k not in _KNOWN_FIELDS},
        )
    except ValidationError as exc:
        return f"invalid scenario: {exc.error_count()} validation error(s)"
