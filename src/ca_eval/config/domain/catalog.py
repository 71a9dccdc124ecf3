"""Scenario catalog configuration model."""

from pydantic import BaseModel, Field


class CatalogConfig(BaseModel, frozen=True):
    quick_scenario_count: int = Field(default=6, ge=0)
