"""
Configuration: typed, validated settings loaded from environment/.env.

The combinators take no configuration. These settings only drive the
logging side of the library (tracing.py):

  RAILSWITCH_LOG_LEVEL       DEBUG / INFO / WARNING / ERROR / CRITICAL (default INFO)
  RAILSWITCH_LOG_FORMAT      console | json (default console)
  RAILSWITCH_TRACE_PAYLOADS  include step values/errors in trace events (default false)

Load order (highest priority first):
  1. Environment variables
  2. .env file in the working directory
  3. Default values
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class RailswitchSettings(BaseSettings):
    """Logging and tracing settings for railswitch."""

    model_config = SettingsConfigDict(
        env_prefix="RAILSWITCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Minimum level for railswitch log events")
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="console: human-readable output, json: one JSON object per line",
    )
    trace_payloads: bool = Field(
        default=False,
        description="Include step values and errors in trace events",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalise to upper case and reject names logging does not know."""
        level = value.strip().upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(
                f"Log level must be one of {', '.join(_LEVEL_NAMES)}, got {value!r}"
            )
        return level

    @property
    def numeric_log_level(self) -> int:
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache(maxsize=1)
def get_settings() -> RailswitchSettings:
    """Return the process-wide settings; call get_settings.cache_clear() to reload."""
    return RailswitchSettings()
