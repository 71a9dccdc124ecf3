"""Top-level ConsoleConfig aggregate — the root configuration object."""

from pydantic import BaseModel, Field

from ca_eval.config.domain.api import ApiConfig
from ca_eval.config.domain.catalog import CatalogConfig
from ca_eval.config.domain.execution import ExecutionConfig


class ConsoleConfig(BaseModel, frozen=True):
    """Root configuration aggregate for a ca-eval console session."""

    name: str = Field(min_length=1)
    api: ApiConfig = ApiConfig()
    execution: ExecutionConfig = ExecutionConfig()
    catalog: CatalogConfig = CatalogConfig()

    @classmethod
    def default(cls) -> "ConsoleConfig":
        """Return the configuration used when no config file is given."""
        return cls(name="default")
