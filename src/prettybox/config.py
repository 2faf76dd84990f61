"""Library settings using Pydantic Settings."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Ambient settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PRETTYBOX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Output
    line_separator: str = Field(default=os.linesep, min_length=1)

    # Metadata
    time_format: str = "%Y-%m-%d %H:%M:%S"


# Global settings instance
settings = Settings()
