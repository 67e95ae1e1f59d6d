"""Configuration management for minish."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

from .logging_utils import configure_logging


class Settings(BaseSettings):
    """Application settings."""

    # Shell Configuration
    prompt: str = Field(default="$ ", description="Prompt written before each input line")
    search_path: Optional[str] = Field(None, description="Directory list used instead of PATH")
    home: Optional[Path] = Field(None, description="Home directory used by cd")
    history_file: Optional[Path] = Field(None, description="History file for interactive sessions")

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Log level")
    log_profile: str = Field(default="default", description="Log profile (default, rich)")

    class Config:
        """Pydantic configuration."""

        env_prefix = "MINISH_"
        case_sensitive = False
        env_file = ".env"
        env_file_encoding = "utf-8"

    def resolve_home(self) -> Path:
        """Return the configured home directory, falling back to the user's."""
        return self.home or Path.home()


def get_settings(**overrides: object) -> Settings:
    """Get application settings.

    Args:
        overrides: Field values that take precedence over the environment

    Returns:
        Settings instance
    """
    settings = Settings(**overrides)

    configure_logging(level=settings.log_level, profile=settings.log_profile)

    return settings
