"""Configuration management for errstack."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ErrstackConfig(BaseSettings):
    """Configuration for errstack."""

    model_config = SettingsConfigDict(
        env_prefix="ERRSTACK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    json_indent: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Indentation for JSON printed by the CLI (0 = compact)",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level used by the CLI",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the logging level name."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: '{v}'. Must be one of {', '.join(LOG_LEVELS)}."
            )
        return level

    def get_log_level(self) -> int:
        """Return the numeric logging level."""
        return getattr(logging, self.log_level)


_config_instance = None


def get_config() -> ErrstackConfig:
    """Get or create global configuration instance."""
    global _config_instance
    if _config_instance is None:
        _config_instance = ErrstackConfig()
        logger.debug("Configuration loaded: log_level=%s", _config_instance.log_level)
    return _config_instance


def reload_config() -> ErrstackConfig:
    """Reload configuration (useful for testing)."""
    global _config_instance
    _config_instance = ErrstackConfig()
    return _config_instance
