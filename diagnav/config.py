"""Configuration loading for the diagnav navigation system.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
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

    # Snapshot feed configuration
    feed_backend: Literal["file", "http"] = Field(
        default="file",
        description="Snapshot feed type",
    )
    feed_file_path: str = Field(
        default="./diagnostics.json",
        description="JSON file holding the current diagnostics list",
    )
    feed_url: str = Field(
        default="http://localhost:8765/diagnostics",
        description="HTTP endpoint returning the current diagnostics list",
    )
    feed_poll_interval_seconds: float = Field(
        default=1.0,
        description="Polling interval in seconds",
    )
    feed_timeout_seconds: float = Field(
        default=10.0,
        description="Request timeout for the HTTP feed in seconds",
    )

    # Location opener configuration
    opener_backend: Literal["stdout", "editor"] = Field(
        default="stdout",
        description="Location opener type",
    )
    editor_command: str = Field(
        default="code -g {path}:{line}:{column}",
        description="Editor command template with {path}, {line} and {column}",
    )

    # Bulk open
    max_open_all_files: int = Field(
        default=20,
        description="Refuse to open all files when more messages than this are present",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose output",
    )

    @field_validator("feed_poll_interval_seconds")
    @classmethod
    def validate_poll_interval(cls, v: float) -> float:
        """Ensure poll interval is positive."""
        if v <= 0:
            raise ValueError("feed_poll_interval_seconds must be positive")
        return v

    @field_validator("feed_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Ensure request timeout is positive."""
        if v <= 0:
            raise ValueError("feed_timeout_seconds must be positive")
        return v

    @field_validator("max_open_all_files")
    @classmethod
    def validate_max_open_all_files(cls, v: int) -> int:
        """Ensure the bulk open limit is positive."""
        if v <= 0:
            raise ValueError("max_open_all_files must be positive")
        return v

    @field_validator("editor_command")
    @classmethod
    def validate_editor_command(cls, v: str) -> str:
        """Ensure the editor command names the file to open."""
        if "{path}" not in v:
            raise ValueError("editor_command must contain a {path} placeholder")
        return v


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
