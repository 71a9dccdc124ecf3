"""ValidationSource Protocol — structural interface to the system-health endpoint."""

from typing import Protocol

from ca_eval.validation.domain.metrics import ValidationMetrics


class ValidationSource(Protocol):
    """Fetches validation metrics. Raises a CaEvalError subclass on failure."""

    async def fetch(self) -> ValidationMetrics: ...
