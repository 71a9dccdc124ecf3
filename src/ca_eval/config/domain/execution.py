"""Execution configuration models."""

from pydantic import BaseModel, Field


class ExecutionConfig(BaseModel, frozen=True):
    """How batch runs are dispatched.

    max_concurrent of 1 means batch items are sent strictly one after another.
    """

    max_concurrent: int = Field(default=1, ge=1)
