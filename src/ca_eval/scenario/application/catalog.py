"""ScenarioCatalog — loads scenarios and degrades when the source is down."""

from ca_eval.scenario.domain.builtin import BUILTIN_COMPLIANCE_SCENARIOS
from ca_eval.scenario.domain.observer import CatalogObserver
from ca_eval.scenario.domain.scenario import Scenario, ScenarioCategory
from ca_eval.scenario.domain.source import ScenarioSource
from ca_eval.scenario.infrastructure.errors import CatalogUnavailable


class ScenarioCatalog:
    """Session-scoped view over remote and built-in scenarios.

    ``load`` never raises for an unreachable source: emotion scenarios degrade
    to an empty list and compliance scenarios degrade to the built-in set.
    There is no refresh policy; calling ``load`` again fetches again.
    """

    def __init__(
        self,
        source: ScenarioSource,
        observer: CatalogObserver,
        quick_scenario_count: int = 6,
    ) -> None:
        self._source = source
        self._observer = observer
        self._quick_scenario_count = quick_scenario_count
        self._loaded: dict[ScenarioCategory, list[Scenario]] = {}

    async def load(
        self, category: ScenarioCategory, difficulty: str | None = None
    ) -> list[Scenario]:
        """Fetch the scenarios of one category.

        Compliance results always end with the built-in conversations; a remote
        scenario with the same id replaces its built-in counterpart.
        """
        self._observer.catalog_loading_started(category=category)
        try:
            remote = await self._source.fetch(category=category, difficulty=difficulty)
        except CatalogUnavailable as exc:
            self._observer.catalog_loading_failed(category=category, reason=exc.reason)
            remote = []

        builtins: list[Scenario] = []
        if category == "compliance":
            remote_ids = {s.id for s in remote}
            builtins = [
                s for s in BUILTIN_COMPLIANCE_SCENARIOS if s.id not in remote_ids
            ]

        scenarios = remote + builtins
        self._loaded[category] = scenarios
        self._observer.catalog_loading_completed(
            category=category,
            remote_count=len(remote),
            builtin_count=len(builtins),
        )
        return scenarios

    def loaded(self, category: ScenarioCategory) -> list[Scenario]:
        """Return what the last ``load`` produced; built-ins only if never loaded."""
        if category in self._loaded:
            return list(self._loaded[category])
        if category == "compliance":
            return list(BUILTIN_COMPLIANCE_SCENARIOS)
        return []

    def quick_scenarios(self) -> list[Scenario]:
        """The first few emotion scenarios, offered as one-click tests."""
        return self.loaded("emotion")[: self._quick_scenario_count]

    def find(self, key: str) -> Scenario | None:
        """Look a scenario up by id or case-insensitive name."""
        wanted = key.strip().casefold()
        for category in ("emotion", "compliance"):
            for scenario in self.loaded(category):
                if scenario.id == key or scenario.name.casefold() == wanted:
                    return scenario
        return None
