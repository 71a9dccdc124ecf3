"""Structlog implementation of the CatalogObserver port."""

import structlog


class StructlogCatalogObserver:
    """Delegates scenario catalog events to structlog.

    Satisfies the CatalogObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def catalog_loading_started(self, category: str) -> None:
        self._log.info("catalog.loading_started", category=category)

    def catalog_entry_skipped(self, category: str, index: int, reason: str) -> None:
        self._log.warning(
            "catalog.entry_skipped", category=category, index=index, reason=reason
        )

    def catalog_loading_completed(
        self, category: str, remote_count: int, builtin_count: int
    ) -> None:
        self._log.info(
            "catalog.loading_completed",
            category=category,
            remote_count=remote_count,
            builtin_count=builtin_count,
        )

    def catalog_loading_failed(self, category: str, reason: str) -> None:
        self._log.error("catalog.loading_failed", category=category, reason=reason)
