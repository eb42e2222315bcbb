"""Pydantic Settings for the grid example service.

All environment variables use the DWRGRID_ prefix.
Example: DWRGRID_PORT=8080, DWRGRID_MAX_ROW_COUNT=500
"""

from __future__ import annotations

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings


class GridSettings(BaseSettings):
    """Grid service configuration validated from environment variables."""

    # Service
    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)
    log_level: str = "INFO"

    # Remoting
    remoting_prefix: str = "/dwr"

    # Generator input clamping
    max_prefix_length: int = Field(default=10, ge=0)
    min_row_count: int = Field(default=1, ge=1)
    max_row_count: int = Field(default=1000, ge=1)

    # CRUD example
    read_batch_size: int = Field(default=10, ge=1)
    counter_start: int = Field(default=0, ge=0)

    model_config = {"env_prefix": "DWRGRID_"}

    @field_validator("remoting_prefix")
    @classmethod
    def _prefix_is_absolute(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("remoting_prefix must start with '/'")
        return value.rstrip("/")

    @model_validator(mode="after")
    def _row_bounds_ordered(self) -> "GridSettings":
        if self.max_row_count < self.min_row_count:
            raise ValueError("max_row_count must be >= min_row_count")
        return self
