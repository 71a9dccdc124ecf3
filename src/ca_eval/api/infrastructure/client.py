"""ApiClient — thin async JSON client for the analysis service REST API."""

import time
from types import TracebackType
from typing import Any

import httpx

from ca_eval.api.domain.observer import ApiObserver
from ca_eval.api.infrastructure.errors import ApiRequestError, ApiTimeoutError
from ca_eval.config.domain.api import ApiConfig

_STATUS_REASONS: dict[int, str] = {
    401: "Unauthorized access",
    403: "Access forbidden",
    404: "Resource not found",
    500: "Server error occurred",
}


def _error_reason(response: httpx.Response) -> str:
    """Turn an error response into the message shown to the console user."""
    message: str | None = None
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        message = body["message"]

    status = response.status_code
    if status in _STATUS_REASONS:
        return _STATUS_REASONS[status]
    if status == 422:
        return message or "Validation error"
    return message or f"An error occurred (HTTP {status})"


class ApiClient:
    """Sends JSON requests and unwraps the service's ``{"success", "data"}`` envelope.

    Status codes and headers stop here: callers only ever see the unwrapped
    ``data`` payload or an ApiRequestError. Use as an async context manager so
    the underlying connection pool is closed.
    """

    def __init__(
        self,
        config: ApiConfig,
        observer: ApiObserver,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout_seconds = config.timeout_seconds
        self._observer = observer
        self._client = httpx.AsyncClient(
            base_url=config.base_url.rstrip("/"),
            timeout=config.timeout_seconds,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, path: str, params: dict[str, str] | None = None) -> Any:
        return await self._request(method="GET", path=path, params=params)

    async def post(self, path: str, body: Any = None) -> Any:
        return await self._request(method="POST", path=path, body=body)

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        body: Any = None,
    ) -> Any:
        """Send one request and return the unwrapped ``data`` field.

        Raises:
            ApiTimeoutError: if the service does not answer in time.
            ApiRequestError: on network errors, error statuses, non-JSON bodies,
                or an envelope with ``success: false``.
        """
        start = time.monotonic()
        try:
            response = await self._client.request(
                method, path, params=params, json=body
            )
        except httpx.TimeoutException as exc:
            error: ApiRequestError = ApiTimeoutError(
                timeout_seconds=self._timeout_seconds
            )
            self._observer.api_request_failed(
                method=method, path=path, reason=error.reason
            )
            raise error from exc
        except httpx.HTTPError as exc:
            reason = f"Network error - please check your connection ({exc})"
            self._observer.api_request_failed(method=method, path=path, reason=reason)
            raise ApiRequestError(reason=reason) from exc

        duration_ms = int((time.monotonic() - start) * 1000)
        self._observer.api_request_completed(
            method=method,
            path=path,
            status_code=response.status_code,
            duration_ms=duration_ms,
        )

        if response.is_error:
            reason = _error_reason(response)
            self._observer.api_request_failed(method=method, path=path, reason=reason)
            raise ApiRequestError(reason=reason, status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as exc:
            reason = "response body is not valid JSON"
            self._observer.api_request_failed(method=method, path=path, reason=reason)
            raise ApiRequestError(reason=reason) from exc

        return _unwrap(
            payload=payload, method=method, path=path, observer=self._observer
        )


def _unwrap(payload: Any, method: str, path: str, observer: ApiObserver) -> Any:
    """Strip the ``{"success", "data"}`` envelope when present."""
    if not isinstance(payload, dict):
        return payload
    if payload.get("success") is False:
        reason = str(payload.get("message") or "service reported failure")
        observer.api_request_failed(method=method, path=path, reason=reason)
        raise ApiRequestError(reason=reason)
    if "data" in payload:
        return payload["data"]
    return payload
