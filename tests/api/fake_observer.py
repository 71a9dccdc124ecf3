"""FakeApiObserver — records API traffic events for assertion in tests."""


class FakeApiObserver:
    def __init__(self) -> None:
        self.completed: list[dict[str, object]] = []
        self.failed: list[dict[str, object]] = []

    def api_request_completed(
        self, method: str, path: str, status_code: int, duration_ms: int
    ) -> None:
        self.completed.append(
            {"method": method, "path": path, "status_code": status_code}
        )

    def api_request_failed(self, method: str, path: str, reason: str) -> None:
        self.failed.append({"method": method, "path": path, "reason": reason})
