"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, name: str, base_url: str) -> None:
        self._log.info("config.loaded", name=name, base_url=base_url)

    def config_concurrency_warning(self, max_concurrent: int) -> None:
        self._log.warning(
            "config.concurrency_warning",
            max_concurrent=max_concurrent,
            message="Concurrent batch dispatch may trip analysis API rate limits",
        )
