"""
Configuration module for the Form Echo Service.

This module defines the settings for the Form Echo Service, including the
listening address, the public directory for static files, and logging levels.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Configuration settings for the Form Echo Service.

    Settings are loaded from .env files and environment variables.
    """

    # Service identity
    SERVICE_NAME: str = "form-echo-service"
    SERVICE_VERSION: str = "1.0.0"

    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = Field(
        default="development",
        validation_alias="ENVIRONMENT",  # Read from global ENVIRONMENT var
        description="Runtime environment for the service",
    )

    HOST: str = "0.0.0.0"
    PORT: int = 3000
    PUBLIC_DIR: Path = Path("public")  # Relative to the process working directory

    # Hypercorn parameters
    WEB_CONCURRENCY: int = 1
    GRACEFUL_TIMEOUT: int = 30
    KEEP_ALIVE_TIMEOUT: int = 5

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
        env_prefix="FORM_ECHO_SERVICE_",  # e.g. FORM_ECHO_SERVICE_PORT
    )

    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    def resolved_public_dir(self) -> Path:
        """Absolute path of the static directory, resolved against the cwd."""
        return self.PUBLIC_DIR.expanduser().resolve()
