"""Analysis API connection settings."""

from pydantic import BaseModel, Field

DEFAULT_BASE_URL = "https://chat-emotion-and-compliance-analyzer.onrender.com/api"
DEFAULT_TIMEOUT_SECONDS = 10.0


class ApiConfig(BaseModel, frozen=True):
    base_url: str = Field(default=DEFAULT_BASE_URL, min_length=1)
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
