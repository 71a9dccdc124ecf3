"""BatchSummary and ComplianceBatchSummary — statistics derived from RunRecords."""

from pydantic import BaseModel, Field


class CategoryStats(BaseModel, frozen=True):
    """Accuracy restricted to records expecting one emotion label."""

    correct: int = Field(ge=0)
    total: int = Field(ge=0)
    accuracy_pct: int = Field(ge=0, le=100)


class BatchSummary(BaseModel, frozen=True):
    """Accuracy and confidence over an emotion batch.

    ``total`` counts every dispatched record, errored ones included. Accuracy
    and confidence are computed over ``scored_count`` records: those with a
    result and an expected label.
    """

    total: int = Field(ge=0)
    scored_count: int = Field(ge=0)
    correct_count: int = Field(ge=0)
    error_count: int = Field(ge=0)
    accuracy_pct: int = Field(ge=0, le=100)
    avg_confidence_pct: int = Field(ge=0, le=100)
    per_category: dict[str, CategoryStats]


class ComplianceBatchSummary(BaseModel, frozen=True):
    total: int = Field(ge=0)
    error_count: int = Field(ge=0)
    checked_count: int = Field(ge=0)
    met_count: int = Field(ge=0)
    met_pct: int = Field(ge=0, le=100)
    avg_score: float = Field(ge=0.0, le=100.0)
