"""
Configuration settings for the studygen toolkit.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Content Service
    # ========================================
    content_api_url: str = Field(
        default="https://classgpt.onrender.com",
        description="Base URL of the study material generation service",
    )
    content_api_timeout_seconds: float = Field(
        default=120.0,
        description="Per-request timeout (generation can be slow on a cold start)",
    )
    content_api_retries: int = Field(
        default=2,
        ge=0,
        description="Extra attempts for a failed generation request",
    )
    content_api_backoff_seconds: float = Field(
        default=2.0,
        ge=0,
        description="Retry n waits n * backoff seconds",
    )

    # ========================================
    # Export
    # ========================================
    export_dir: str = Field(
        default="exports",
        description="Directory export files are written to",
    )
    default_export_format: Literal["txt", "md", "html", "pdf"] = Field(
        default="txt",
        description="Export format used when none is given",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Log level for the CLI's stderr sink",
    )

    def get_content_api_config(self) -> dict[str, object]:
        """Keyword arguments for ContentSourceClient."""
        return {
            "base_url": self.content_api_url,
            "timeout_seconds": self.content_api_timeout_seconds,
            "retries": self.content_api_retries,
            "backoff_seconds": self.content_api_backoff_seconds,
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
