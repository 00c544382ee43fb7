"""Configuration for the WorkOS API client."""

from __future__ import annotations

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.workos.com"


class Settings(BaseSettings):
    """Runtime settings loaded from environment."""

    api_key: SecretStr = SecretStr("")
    client_id: str | None = None
    base_url: str = DEFAULT_BASE_URL

    connect_timeout: float = 10.0
    read_timeout: float = 30.0
    write_timeout: float = 10.0
    pool_timeout: float = 10.0

    model_config = SettingsConfigDict(env_prefix="WORKOS_", env_file=".env", extra="ignore")
