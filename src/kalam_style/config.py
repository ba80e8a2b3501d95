"""Configuration management for Kalam Style."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, loaded from environment and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="KALAM_",
    )

    # Paths
    data_dir: Path = Field(default=Path("data"))

    # Input validation (enforced by callers of the engine, not the engine)
    min_text_length: int = Field(default=100, description="Minimum characters for a style analysis")
    min_persona_text_length: int = Field(
        default=200, description="Minimum characters to fingerprint a persona from its source texts"
    )
    persona_source_texts: int = Field(default=3, description="Source texts combined for a fallback fingerprint")

    # Prompting
    default_task: str = Field(default="Write a sample paragraph to demonstrate the author's style")

    # Logging
    log_level: str = Field(default="WARNING")

    @property
    def personas_dir(self) -> Path:
        return self.data_dir / "personas"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
