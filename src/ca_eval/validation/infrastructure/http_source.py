"""HttpValidationSource — reads metrics from ``GET /testing/validate``."""

from pydantic import ValidationError

from ca_eval.api.infrastructure.client import ApiClient
from ca_eval.api.infrastructure.errors import ApiRequestError
from ca_eval.validation.domain.metrics import ValidationMetrics
from ca_eval.validation.infrastructure.errors import ValidationSourceError


class HttpValidationSource:
    """Satisfies the ValidationSource protocol structurally."""

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    async def fetch(self) -> ValidationMetrics:
        """
        Raises:
            ValidationSourceError: if the request fails or the metrics are malformed.
        """
        try:
            payload = await self._client.get("/testing/validate")
        except ApiRequestError as exc:
            raise ValidationSourceError(reason=exc.reason) from exc
        try:
            return ValidationMetrics.model_validate(payload)
        except ValidationError as exc:
            raise ValidationSourceError(
                reason=f"malformed metrics ({exc.error_count()} error(s))"
            ) from exc
