"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from isspass.shared import EnumEnvironment, EnumLogLevel
from isspass.shared.consts import (
    DEFAULT_GEO_URL,
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    DEFAULT_IP_ECHO_URL,
    DEFAULT_PASS_URL,
)
from isspass.shared.env import load_secret_file_variables  # noqa: F401


class AppInfoSettings(BaseSettings):
    """Application metadata settings."""

    title: str = Field(default="ISS Pass Finder", description="Application title")
    description: str = Field(
        default="Upcoming International Space Station passes "
        "for the caller's current location",
        description="Application description",
    )
    version: str = Field(default="1.0.0", description="Application version")
    debug: bool = Field(default=False, description="Enable debug mode")
    port: int = Field(default=8000, description="Port to bind the server")

    model_config = SettingsConfigDict(
        env_prefix="APP_", case_sensitive=False, extra="ignore"
    )


class UpstreamSettings(BaseSettings):
    """Endpoints of the three services the pass lookup chains together."""

    ip_echo_url: str = Field(
        default=DEFAULT_IP_ECHO_URL, description="IP echo service base URL"
    )
    geo_url: str = Field(
        default=DEFAULT_GEO_URL, description="IP geolocation service base URL"
    )
    pass_url: str = Field(
        default=DEFAULT_PASS_URL, description="ISS pass prediction service base URL"
    )
    timeout_seconds: float = Field(
        default=DEFAULT_HTTP_TIMEOUT_SECONDS,
        gt=0,
        description="Per-request timeout in seconds",
    )

    model_config = SettingsConfigDict(
        env_prefix="UPSTREAM_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(
        default=EnumLogLevel.WARNING, description="Logging level"
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    app: AppInfoSettings = Field(default_factory=AppInfoSettings)
    upstream: UpstreamSettings = Field(default_factory=UpstreamSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on enviroment.
    """
    return AppSettings()


settings = get_settings()
