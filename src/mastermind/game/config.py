"""Configuration management using pydantic-settings.

Key patterns:
1. Multiple env files (.env, .env.local) - local overrides shared
2. validation_alias for explicit env var names
3. Singleton instance for easy import

Usage:
    from mastermind.game.config import settings
    print(settings.base_url)
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


def normalize_base_url(value: str) -> str:
    """Strip trailing slashes; warn if guesses would travel over plain HTTP.

    Applied to the configured URL and to command-line overrides alike.
    """
    value = value.rstrip("/")
    if value.startswith("http://"):
        logger.warning("Game server is not using HTTPS: %s", value)
    return value


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    All settings use the MASTERMIND_ prefix and have working defaults, so
    the client runs with no environment at all.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        extra="ignore",
    )

    @field_validator("base_url")
    @classmethod
    def check_base_url(cls, value: str) -> str:
        return normalize_base_url(value)

    # ==========================================================================
    # SERVER
    # ==========================================================================

    base_url: str = Field(
        default="https://mastermind.darkube.app",
        validation_alias="MASTERMIND_BASE_URL",
        description="Root URL of the game API",
    )

    http_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        validation_alias="MASTERMIND_HTTP_TIMEOUT_SECONDS",
        description="Timeout for HTTP requests",
    )

    # ==========================================================================
    # GAME
    # ==========================================================================

    max_attempts: int = Field(
        default=10,
        ge=1,
        validation_alias="MASTERMIND_MAX_ATTEMPTS",
        description="Scored guesses allowed per game (tracked locally)",
    )


# Singleton instance
settings = Settings.model_validate({})
