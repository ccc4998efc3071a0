"""
Application configuration.
Values are loaded from GYMTRACKER_* environment variables or a .env file.
"""
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_DB_PATH = "./gymtracker"


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="GYMTRACKER_",
        env_file=".env",
        extra="ignore",
    )

    # Storage
    DB_PATH: str = DEFAULT_DB_PATH
    DB_FILENAME: str = "workout-data.sqlite3"
    DB_ECHO: bool = False

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "console"  # json or console

    # Reject intensity outside 1-10 at the command line.
    # The store accepts any integer regardless of this flag.
    STRICT_INTENSITY: bool = False

    @property
    def database_file(self) -> Path:
        """Full path of the embedded database file."""
        return Path(self.DB_PATH) / self.DB_FILENAME

    @property
    def database_url(self) -> str:
        return f"sqlite:///{self.database_file}"


@lru_cache
def get_settings() -> Settings:
    """Return the settings for this process."""
    return Settings()
