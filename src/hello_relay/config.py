"""Configuration management for hello-relay."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Relay target. Not validated here: a malformed URL is reported per request.
    external_url: str = Field(
        "https://httpbin.org/status/204", description="External URL called on every request"
    )

    # API Configuration
    api_host: str = Field("0.0.0.0", description="API host")
    api_port: int = Field(8080, ge=1, le=65535, description="API port")

    # Timeouts
    request_timeout: float = Field(
        5.0, gt=0, description="Timeout in seconds for the external call"
    )
    shutdown_timeout: int = Field(
        5, ge=0, description="Grace period in seconds for in-flight requests on shutdown"
    )

    # Application Configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Logging level"
    )
    debug: bool = Field(False, description="Enable debug mode")


# Global settings instance
settings = Settings()
