"""Client settings via environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from bingx_swap.constants import DEFAULT_BASE_URL

__all__ = ["Settings"]


class Settings(BaseSettings):
    """Central configuration — all values from environment."""

    model_config = SettingsConfigDict(env_prefix="BINGX_")

    # Credentials (validated by the client, not here)
    api_key: str = ""
    api_secret: str = ""

    # Transport
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0
