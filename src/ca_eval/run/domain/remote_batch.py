"""Server-side batch port — the service runs its own scenarios and reports entries."""

from typing import Literal, Protocol

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

type RemoteBatchKind = Literal["emotions", "compliance"]


class RemoteBatchEntry(BaseModel, frozen=True):
    """One entry reported by ``POST /testing/batch/{kind}``.

    Emotion entries carry ``result`` (the predicted label) and ``confidence``;
    compliance entries carry ``score`` and optionally a compliance summary.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = "unnamed"
    text: str | None = None
    expected: str | None = Field(
        default=None, validation_alias=AliasChoices("expected", "expectedScore")
    )
    result: str | None = None
    confidence: float | None = Field(default=None, ge=0.0, le=1.0)
    correct: bool | None = None
    score: float | None = Field(
        default=None,
        ge=0.0,
        le=100.0,
        validation_alias=AliasChoices("score", "overall_compliance_score"),
    )
    compliance_summary: dict[str, object] | None = None
    error: str | None = None


class RemoteBatchSource(Protocol):
    """Triggers a server-side batch and returns its entries.

    Raises a CaEvalError subclass when the batch endpoint fails.
    """

    async def run(self, kind: RemoteBatchKind) -> list[RemoteBatchEntry]: ...
