"""
Engine Configuration

Uses Pydantic Settings for type-safe environment variable loading.
Variables use the STREAKRULES_ prefix and may come from a .env file.
"""

from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineSettings(BaseSettings):
    """Rule engine configuration."""

    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    default_max_history: int = Field(
        default=1,
        ge=1,
        description="History bound used by rules that do not set max_history_required"
    )
    structured_diagnostics: bool = Field(
        default=True,
        description="Emit action diagnostics as JSON (False: plain text)"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper

    model_config = SettingsConfigDict(
        env_prefix="STREAKRULES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
_settings: Optional[EngineSettings] = None


def get_settings() -> EngineSettings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = EngineSettings()
    return _settings


def reload_settings() -> EngineSettings:
    """Reload settings from environment (useful for testing)."""
    global _settings
    _settings = EngineSettings()
    return _settings
