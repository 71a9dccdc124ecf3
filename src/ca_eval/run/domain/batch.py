"""BatchRun — every RunRecord produced by one batch dispatch."""

from pydantic import BaseModel, Field

from ca_eval.run.domain.record import RunRecord


class BatchRun(BaseModel, frozen=True):
    """Immutable result of a batch.

    Records keep the order in which scenarios were submitted. ``error`` is set
    only when the batch as a whole could not be run (remote batches).
    """

    run_id: str = Field(min_length=1)
    records: list[RunRecord]
    error: str | None = None

    @property
    def failed_records(self) -> list[RunRecord]:
        return [r for r in self.records if r.is_error]
