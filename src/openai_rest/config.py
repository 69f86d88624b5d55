"""
config.py

PURPOSE: Optional settings loading for applications that build a client.
DEPENDENCIES: pydantic, pydantic-settings

ARCHITECTURE NOTES:
The client itself takes explicit arguments and never reads the environment.
These settings are a convenience for callers. Sources (in priority order):
1. Explicit constructor arguments
2. Environment variables (OPENAI_REST_*, plus OPENAI_API_KEY / OPENAI_KEY)
3. Defaults
"""

import os

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_BASE_URL = "https://api.openai.com/v1/"


class OpenAISettings(BaseSettings):
    """Connection settings for the OpenAI REST API."""

    api_key: str = Field(
        default="",
        description="API key sent as a bearer token (or set OPENAI_API_KEY)",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Root URL all endpoint paths are resolved against",
    )
    max_retries: int = Field(
        default=2,
        ge=0,
        description="Connection attempts retried by the HTTP transport",
    )
    timeout: float = Field(
        default=60.0,
        gt=0,
        description="Per-request timeout in seconds",
    )

    model_config = {"env_prefix": "OPENAI_REST_"}


class OpenTelemetrySettings(BaseSettings):
    """Settings for OpenTelemetry tracing."""

    enabled: bool = Field(
        default=False,
        description="Enable OpenTelemetry tracing",
    )
    service_name: str = Field(
        default="openai-rest",
        description="Service name reported with spans",
    )
    endpoint: str | None = Field(
        default=None,
        description="OTLP gRPC endpoint (console export only when unset)",
    )

    model_config = {"env_prefix": "OPENAI_REST_OTEL_"}


class Settings(BaseSettings):
    """Top-level settings."""

    openai: OpenAISettings = Field(
        default_factory=OpenAISettings,
        description="API connection settings",
    )
    otel: OpenTelemetrySettings = Field(
        default_factory=OpenTelemetrySettings,
        description="OpenTelemetry settings",
    )

    model_config = {"env_prefix": "OPENAI_REST_"}


def get_settings() -> Settings:
    """Get settings, loading from environment."""
    openai_settings = OpenAISettings()

    # Fall back to the conventional key variables
    if not openai_settings.api_key:
        api_key = os.environ.get("OPENAI_API_KEY") or os.environ.get("OPENAI_KEY", "")
        openai_settings = openai_settings.model_copy(update={"api_key": api_key})

    return Settings(openai=openai_settings)
