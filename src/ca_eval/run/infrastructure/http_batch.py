"""HttpRemoteBatchSource — triggers ``POST /testing/batch/{kind}``."""

from pydantic import ValidationError

from ca_eval.api.infrastructure.client import ApiClient
from ca_eval.api.infrastructure.errors import ApiRequestError
from ca_eval.run.domain.remote_batch import RemoteBatchEntry, RemoteBatchKind
from ca_eval.run.infrastructure.errors import RemoteBatchError


class HttpRemoteBatchSource:
    """Satisfies the RemoteBatchSource protocol structurally."""

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    async def run(self, kind: RemoteBatchKind) -> list[RemoteBatchEntry]:
        """
        Raises:
            RemoteBatchError: if the request fails or the payload is not a list
                of entries.
        """
        try:
            payload = await self._client.post(f"/testing/batch/{kind}")
        except ApiRequestError as exc:
            raise RemoteBatchError(kind=kind, reason=exc.reason) from exc

        if not isinstance(payload, list):
            raise RemoteBatchError(kind=kind, reason="batch payload is not a list")
        try:
            return [RemoteBatchEntry.model_validate(entry) for entry in payload]
        except ValidationError as exc:
            raise RemoteBatchError(
                kind=kind, reason=f"malformed entry ({exc.error_count()} error(s))"
            ) from exc
