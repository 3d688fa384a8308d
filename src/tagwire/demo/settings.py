from __future__ import annotations

from typing import Any, Literal, get_args

try:
    from pydantic import ValidationError, field_validator
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    msg = (
        "The tagwire demo reads its settings with pydantic-settings. "
        'Install it with: pip install "tagwire[demo]"'
    )
    raise ImportError(msg) from e

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]
LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)


class DemoSettings(BaseSettings):
    """Demo settings, read from ``TAGWIRE_DEMO_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="TAGWIRE_DEMO_")

    database: str = ":memory:"
    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.upper()
        return value


__all__ = ["LOG_LEVELS", "DemoSettings", "LogLevel", "ValidationError"]
