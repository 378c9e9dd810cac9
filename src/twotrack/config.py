"""
Configuration — typed, validated settings loaded from environment/.env.

Uses pydantic-settings to:
  - Load from environment variables prefixed with TWOTRACK_
  - Fall back to a .env file in the working directory
  - Validate types and constraints on first access

Sub-settings are plain BaseModel classes populated by TwotrackSettings via
env_nested_delimiter="__", so TWOTRACK_FORMATTER__INDENT maps to
formatter.indent and TWOTRACK_BOUNDARY__LOG_CAPTURED to boundary.log_captured.

Nothing is read at import time. Call get_settings() and, after changing the
environment, get_settings.cache_clear() to reload.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class FormatterSettings(BaseModel):
    """How payloads are rendered into UnwrapError default messages."""

    indent: int = Field(default=2, ge=0, le=8, description="JSON indent for structured payloads")
    sort_keys: bool = Field(default=False, description="Sort mapping keys when rendering")


class BoundarySettings(BaseModel):
    """Behaviour of the exception-to-Result boundary adapters."""

    log_captured: bool = Field(
        default=True,
        description="Emit a debug event for every exception captured into a Failure",
    )


class TwotrackSettings(BaseSettings):
    """
    Root settings — aggregates all sub-settings.

    Load order (highest priority first):
      1. Environment variables
      2. .env file
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="TWOTRACK_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    log_level: str = Field(default="INFO")
    formatter: FormatterSettings = Field(default_factory=FormatterSettings)
    boundary: BoundarySettings = Field(default_factory=BoundarySettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalise to upper case and reject unknown level names."""
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> TwotrackSettings:
    """Load settings once and reuse them."""
    return TwotrackSettings()


def formatter_settings() -> FormatterSettings:
    """
    Formatter options from get_settings(), or the defaults when the
    environment does not validate.

    format_value() must never raise, so a bad TWOTRACK_* value anywhere
    in the environment leaves rendering on its defaults.
    """
    try:
        return get_settings().formatter
    except ValidationError:
        return FormatterSettings()


def boundary_settings() -> BoundarySettings:
    """Boundary options, falling back to the defaults on invalid settings."""
    try:
        return get_settings().boundary
    except ValidationError:
        return BoundarySettings()
