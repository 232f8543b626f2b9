"""Package settings loaded from the environment."""

import logging
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hexcodec.exceptions import ConfigurationError


LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """
    Runtime settings.

    Values come from HEXCODEC_* environment variables or a local .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="HEXCODEC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    read_buffer_size: int = Field(default=32 * 1024, gt=0, description="Chunk size for stream reads")
    log_level: str = Field(default="WARNING", description="Level for configure_logging()")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the cached settings."""
    global _settings
    if _settings is None:
        try:
            _settings = Settings()
        except ValidationError as e:
            raise ConfigurationError(f"Invalid hexcodec settings: {e}") from e
    return _settings


def reset_settings():
    """Reset cached settings (for testing)."""
    global _settings
    _settings = None


def configure_logging(settings: Optional[Settings] = None):
    """
    Apply the configured log level.

    The level is set on the hexcodec logger directly, since basicConfig does
    nothing when the host application has already configured the root logger.
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level)
    logging.getLogger("hexcodec").setLevel(level)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
