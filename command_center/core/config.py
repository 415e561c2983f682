"""Configuration management using Pydantic Settings."""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from command_center.core.catalog import DEFAULT_ELICE_URL, DEFAULT_REPLIT_URL

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application Settings
    APP_ENV: Literal["development", "staging", "production"] = "development"

    # Logging
    LOG_FORMAT: Literal["text", "json"] = "text"
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # CORS Configuration
    CORS_ORIGINS: str = "*"

    # OODA loop history retention (0 keeps every record)
    OODA_HISTORY_LIMIT: int = 0

    # Cloud endpoints reported by /cloud/status
    ELICE_URL: str = DEFAULT_ELICE_URL
    REPLIT_URL: str = DEFAULT_REPLIT_URL

    # Harness pipeline trigger
    HARNESS_PAT: SecretStr = SecretStr("")
    HARNESS_ACCOUNT: str = ""
    HARNESS_ORG: str = "default"
    HARNESS_PROJECT: str = "default_project"
    HARNESS_BASE_URL: str = "https://app.harness.io"
    HARNESS_DEFAULT_PIPELINE: str = "deploy_ai_orchestration_hub"
    HARNESS_TIMEOUT_SECONDS: float = 30.0

    @field_validator("HARNESS_BASE_URL")
    @classmethod
    def validate_harness_base_url(cls, v: str) -> str:
        """Validate that HARNESS_BASE_URL is a valid URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("HARNESS_BASE_URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("OODA_HISTORY_LIMIT")
    @classmethod
    def validate_history_limit(cls, v: int) -> int:
        """Reject negative retention limits."""
        if v < 0:
            raise ValueError("OODA_HISTORY_LIMIT must be >= 0")
        return v

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def history_limit(self) -> int | None:
        """History retention limit for the phase engine, None when unbounded."""
        return self.OODA_HISTORY_LIMIT or None

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.APP_ENV == "development"

    @property
    def harness_configured(self) -> bool:
        """Check if a Harness personal access token is configured."""
        return bool(self.HARNESS_PAT.get_secret_value())

    def validate_startup(self) -> None:
        """Validate that dependent settings are configured together.

        Raises:
            ValueError: If a Harness token is set without an account identifier.
        """
        if self.harness_configured and not self.HARNESS_ACCOUNT:
            raise ValueError("HARNESS_ACCOUNT is required when HARNESS_PAT is configured")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings instance with validated configuration.

    Raises:
        ValueError: If dependent settings are inconsistent.
    """
    settings = Settings()
    settings.validate_startup()
    return settings
