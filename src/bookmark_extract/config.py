"""Configuration management for bookmark-extract."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BOOKMARK_EXTRACT_",
        extra="ignore",
    )

    # Output
    format: str = "tud"
    schemeless: bool = False

    # Successful runs exit 1 for compatibility with existing scripts.
    success_exit_code: int = 1

    # Extraction
    temp_dir: Optional[Path] = None
    favorites_encoding: str = "utf-8-sig"


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
