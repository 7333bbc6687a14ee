# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.EMAIL_HOST)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Nothing here is required: without EMAIL_HOST/EMAIL_USER/EMAIL_PASS the
# service runs with notifications logged to the console instead of sent.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Email Transport (SMTP)
    # -------------------------------------------------------------------------
    # Host, user and password must all be set for real delivery

    EMAIL_HOST: str | None = Field(
        default=None,
        description="SMTP server hostname (e.g., smtp.gmail.com)"
    )

    EMAIL_PORT: int = Field(
        default=587,
        ge=1,
        le=65535,
        description="SMTP server port (STARTTLS is used on non-465 ports)"
    )

    EMAIL_USER: str | None = Field(
        default=None,
        description="SMTP login user"
    )

    EMAIL_PASS: str | None = Field(
        default=None,
        description="SMTP login password / app password"
    )

    EMAIL_FROM: str | None = Field(
        default=None,
        description="From address for notifications (defaults to EMAIL_USER)"
    )

    EMAIL_TIMEOUT: float = Field(
        default=30.0,
        gt=0,
        description="Seconds to wait on the SMTP server before giving up"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    APP_NAME: str = Field(
        default="Executive Hiring Notification System",
        description="Display name used in notification footers"
    )

    SERVICE_NAME: str = Field(
        default="Email Backend",
        description="Service name reported by /health"
    )

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    CORS_ORIGINS: str = Field(
        default="*",
        description="Allowed CORS origins (comma-separated)"
    )

    MAX_BODY_BYTES: int = Field(
        default=10 * 1024 * 1024,
        ge=1,
        description="Largest request body accepted, by Content-Length"
    )

    # -------------------------------------------------------------------------
    # Storage
    # -------------------------------------------------------------------------

    DATA_DIR: str = Field(
        default="data",
        description="Directory holding applications.json and teams.json"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Treat EMAIL_HOST= as unset
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def email_configured(self) -> bool:
        """True when host and credentials are present."""
        return bool(self.EMAIL_HOST and self.EMAIL_USER and self.EMAIL_PASS)

    @property
    def email_from_address(self) -> str | None:
        """EMAIL_FROM, falling back to the login user."""
        return self.EMAIL_FROM or self.EMAIL_USER

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
