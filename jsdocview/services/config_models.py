"""
Pydantic models for jsdocview configuration.

Uses pydantic-settings for environment variable validation and type coercion.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class JsDocViewSettings(BaseSettings):
    """
    Application settings, read from JSDOCVIEW_* variables or a .env file.

    Usage:
        settings = JsDocViewSettings()
        print(settings.log_level)
    """

    model_config = SettingsConfigDict(env_prefix="JSDOCVIEW_", env_file=".env", extra="ignore")

    log_level: str = "INFO"
    document_title: str = "Code Documentation"

    # Polling interval of the watch command, in seconds
    watch_interval: float = Field(default=0.5, gt=0.0)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(LOG_LEVELS)}, got '{v}'")
        return level


__all__ = ["JsDocViewSettings", "LOG_LEVELS"]
