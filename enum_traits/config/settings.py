"""enum-traits settings loaded from environment variables."""

from enum import StrEnum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(StrEnum):
    """Deployment environment."""

    DEV = "dev"
    STAGING = "staging"
    PROD = "prod"


class LogLevel(StrEnum):
    """Supported log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Library-wide settings loaded from environment variables / .env file.

    Every variable is read with the ``ENUM_TRAITS_`` prefix, e.g.
    ``ENUM_TRAITS_LABEL_CATALOG_PATH``.
    """

    model_config = SettingsConfigDict(
        env_prefix="ENUM_TRAITS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Labels ---
    LABEL_CATALOG_PATH: str | None = Field(
        default=None,
        description="JSON label catalog consulted when a declaration has no explicit labels.",
    )
    LABEL_LOCALE: str = Field(
        default="en",
        description="Top-level catalog key used for label lookups.",
    )

    # --- Validation ---
    VALIDATE_ON_FLUSH: bool = Field(
        default=True,
        description="Reject invalid enum values when an ORM session flushes.",
    )

    # --- Logging ---
    LOG_LEVEL: LogLevel = Field(
        default=LogLevel.INFO,
        description="Library log level.",
    )

    # --- Environment ---
    ENVIRONMENT: Environment = Field(
        default=Environment.DEV,
        description="Deployment environment (dev/staging/prod).",
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.ENVIRONMENT == Environment.PROD


def get_settings() -> Settings:
    """Factory function so callers and tests can build fresh settings."""
    return Settings()
