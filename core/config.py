# core/config.py
"""
Application settings.

Values are read from environment variables (and from a ``.env`` file in
the working directory when present). Every field has a default so the
API and the CLI start without any configuration.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings shared by the API and the CLI"""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    project_name: str = Field("Book and Topic Management API", description="OpenAPI title")
    api_version: str = Field("1.0", description="OpenAPI version")
    debug: bool = Field(False, description="Run FastAPI in debug mode")

    database_url: str = Field("sqlite:///catalog.db", description="SQLAlchemy connection URL")

    log_level: str = Field("INFO", description="Root log level")
    log_file: Optional[str] = Field(None, description="Optional log file path")

    host: str = Field("0.0.0.0", description="Bind host for the API server")
    port: int = Field(3000, description="Bind port for the API server")


@lru_cache()
def get_settings() -> Settings:
    """Return the cached settings instance"""
    return Settings()


settings = get_settings()
