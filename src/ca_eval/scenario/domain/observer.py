"""Observer port for the scenario catalog — defines events in domain language."""

from typing import Protocol


class CatalogObserver(Protocol):
    def catalog_loading_started(self, category: str) -> None: ...

    def catalog_entry_skipped(self, category: str, index: int, reason: str) -> None: ...

    def catalog_loading_completed(
        self, category: str, remote_count: int, builtin_count: int
    ) -> None: ...

    def catalog_loading_failed(self, category: str, reason: str) -> None: ...
