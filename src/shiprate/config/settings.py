# src/shiprate/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides configuration loading using Pydantic Settings. Values come from
environment variables or a .env file and are validated at load time.

There is no global settings instance: the entry point calls load_settings()
once and passes the result into the carrier factory. Carrier classes only
ever receive plain constructor arguments.

Files that USE this module:
- shiprate.app (loads settings at startup)
- shiprate.application.rates_service (create_carrier reads carrier settings)
- shiprate.adapters.carriers.ups.carrier (UPSCarrier.from_settings)

Files that this module USES:
- shiprate.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Any, Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from shiprate.shared.validators import (
    validate_credential,  # Validate OAuth client id / secret
    validate_http_url,  # Validate endpoint URLs
)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Carrier integration settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- UPS ---
    ups_client_id: str = Field(..., alias="UPS_CLIENT_ID")
    ups_client_secret: str = Field(..., alias="UPS_CLIENT_SECRET")
    ups_api_base_url: str = Field(default="https://onlinetools.ups.com/api", alias="UPS_API_BASE_URL")
    ups_auth_url: str = Field(
        default="https://onlinetools.ups.com/security/v1/oauth/token", alias="UPS_AUTH_URL"
    )

    # --- HTTP Settings ---
    request_timeout_seconds: float = Field(default=30, alias="REQUEST_TIMEOUT_SECONDS", ge=1, le=120)
    # Retry budget for callers handling retryable CarrierErrors; the carriers never retry on their own
    max_retries: int = Field(default=3, alias="MAX_RETRIES", ge=0, le=10)

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @field_validator("ups_client_id", "ups_client_secret")
    @classmethod
    def validate_credentials(cls, v: str) -> str:
        """Validate client credential format."""
        if not validate_credential(v):
            raise ValueError("UPS client credentials must be non-empty and contain no whitespace")
        return v

    @field_validator("ups_api_base_url", "ups_auth_url")
    @classmethod
    def validate_urls(cls, v: str) -> str:
        """Validate endpoint URLs."""
        if not validate_http_url(v):
            raise ValueError("UPS endpoint URLs must be absolute http(s) URLs")
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")
        return level


def load_settings(**overrides: Any) -> Settings:
    """
    Build the configuration value once at process start.

    Args:
        **overrides: Field values (by name or env alias) taking precedence
            over the environment

    Returns:
        Validated Settings

    Raises:
        pydantic.ValidationError: If required values are missing or invalid
    """
    return Settings(**overrides)
