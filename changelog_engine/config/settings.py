"""Application settings using environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration loaded from environment."""

    # Logging
    log_level: str = Field(default="INFO")
    log_structured: bool = Field(default=True)

    # Parsing
    # Used when the parser is handed bytes or a binary stream
    input_encoding: str = Field(default="utf-8")

    model_config = SettingsConfigDict(
        env_prefix="CHANGELOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"  # Ignore extra fields from .env file
    )


settings = Settings()
