"""Client configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client configuration."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="GISTKIT_")

    # GitHub API settings
    github_api_base_url: str = "https://api.github.com"
    github_api_version: str = "2022-11-28"
    github_api_timeout: float = 10.0
    github_token: str | None = None


@lru_cache
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()
