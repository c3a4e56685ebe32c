"""
treeactions configuration
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from `TREEACTIONS_*` environment variables or `.env`."""

    # Logging
    debug: bool = False
    log_level: str = "INFO"
    log_json: bool = False

    # Seconds to wait for the action barrier; None waits forever
    barrier_timeout: float | None = None

    model_config = SettingsConfigDict(
        env_prefix="TREEACTIONS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
