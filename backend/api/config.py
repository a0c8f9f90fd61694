"""Global configuration for the DevTools API."""

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "DevTools API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    log_dir: Optional[Path] = None

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_prefix: str = "/api"

    # Outbound fetch; None keeps the httpx default timeout
    fetch_timeout: Optional[float] = None
    fetch_follow_redirects: bool = True

    # Security
    cors_origins: List[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


# Global settings instance
settings = get_settings()
