"""
Configuration Management for the Kidney Risk Service

Environment-based configuration using Pydantic Settings.
"""
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra fields from .env file
    )

    # Application
    app_name: str = "KidneyGuard Risk Assessment"
    app_version: str = "1.0.0"
    debug: bool = Field(default=False, description="Enable debug mode")

    # API Configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_prefix: str = "/api/v1"
    cors_origins: List[str] = ["*"]

    # Logging
    log_level: str = Field(default="INFO", description="Log level for the kidneyguard logger")
    log_tree_votes: bool = Field(default=False, description="Debug-log each decision tree's vote")


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
