"""Structlog implementation of the ApiObserver port."""

import structlog


class StructlogApiObserver:
    """Delegates API traffic events to structlog.

    Satisfies the ApiObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def api_request_completed(
        self, method: str, path: str, status_code: int, duration_ms: int
    ) -> None:
        self._log.debug(
            "api.request_completed",
            method=method,
            path=path,
            status_code=status_code,
            duration_ms=duration_ms,
        )

    def api_request_failed(self, method: str, path: str, reason: str) -> None:
        self._log.error("api.request_failed", method=method, path=path, reason=reason)
