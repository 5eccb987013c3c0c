"""
Application settings and configuration management.
Uses pydantic-settings for environment variable loading.
"""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Main application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Logistics Matching Service"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"

    # API Settings
    api_prefix: str = "/api/v1"
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: List[str] = ["*"]

    # Rate Limiting
    rate_limit: str = "100/minute"

    # Logistics
    earth_radius_km: float = Field(default=6371.0, gt=0)
    zone_membership_mode: str = Field(
        default="radius",
        pattern="^(radius|polygon)$",
        description="radius = center/radius circle, polygon = boundary polygon containment",
    )

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    # Monitoring - Elastic APM
    apm_enabled: bool = False
    apm_server_url: str = "http://localhost:8200"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
