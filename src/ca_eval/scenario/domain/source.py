"""ScenarioSource Protocol — structural interface for fetching remote scenarios."""

from typing import Protocol

from ca_eval.scenario.domain.scenario import Scenario, ScenarioCategory


class ScenarioSource(Protocol):
    """Fetches the scenarios of one category.

    Raises CatalogUnavailable when the backing store cannot be reached.
    """

    async def fetch(
        self, category: ScenarioCategory, difficulty: str | None = None
    ) -> list[Scenario]: ...
