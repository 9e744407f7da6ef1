"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Authentication service
    auth_service_url: str = "http://localhost:8000"
    register_path: str = "/auth/register"
    request_timeout_seconds: float = 30.0  # Free-tier backend may need 20-30s to wake up

    # Navigation
    post_registration_destination: str = "/dashboard"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
