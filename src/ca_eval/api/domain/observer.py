"""Observer port for HTTP traffic to the analysis API."""

from typing import Protocol


class ApiObserver(Protocol):
    def api_request_completed(
        self, method: str, path: str, status_code: int, duration_ms: int
    ) -> None: ...

    def api_request_failed(self, method: str, path: str, reason: str) -> None: ...
