"""Configuration loading for the registrar enrollment engine.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Registry configuration
    database_path: str = Field(
        default="./data/registrar.db",
        description="SQLite database file path",
    )

    # Notification configuration
    notification_backend: Literal["stdout", "markdown", "smtp"] = Field(
        default="stdout",
        description="Notifier backend type",
    )
    notification_outbox_dir: str = Field(
        default="./outbox",
        description="Output directory for markdown outbox files",
    )
    smtp_host: str = Field(
        default="",
        description="SMTP server hostname",
    )
    smtp_port: int = Field(
        default=587,
        description="SMTP server port",
    )
    smtp_username: str = Field(
        default="",
        description="SMTP authentication username",
    )
    smtp_password: str = Field(
        default="",
        description="SMTP authentication password",
    )
    smtp_use_tls: bool = Field(
        default=True,
        description="Upgrade SMTP connections with STARTTLS",
    )
    smtp_from_email: str = Field(
        default="",
        description="Sender address for confirmation emails",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging",
    )

    @field_validator("smtp_port")
    @classmethod
    def validate_smtp_port(cls, v: int) -> int:
        """Ensure SMTP port is in valid range."""
        if v <= 0 or v > 65535:
            raise ValueError("smtp_port must be between 1 and 65535")
        return v

    @field_validator("database_path")
    @classmethod
    def validate_database_path(cls, v: str) -> str:
        """Ensure a database path is given."""
        if not v.strip():
            raise ValueError("database_path must not be empty")
        return v

    @model_validator(mode="after")
    def validate_smtp_settings(self) -> "Settings":
        """Require host and sender when the SMTP backend is selected."""
        if self.notification_backend == "smtp":
            if not self.smtp_host or not self.smtp_from_email:
                raise ValueError(
                    "smtp_host and smtp_from_email are required for the smtp backend"
                )
        return self


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
