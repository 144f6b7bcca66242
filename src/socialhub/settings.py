"""
socialhub.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the API, session cookie and persistence layers.
- Hide the session signing secret from repr/logging.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SOCIALHUB_", case_sensitive=False)

    # Environment controls toggle behavior like auto-init DB tables.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "socialhub"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Sessions
    session_cookie_name: str = "socialhub_session"
    session_cookie_secure: bool = False
    session_ttl_minutes: int = Field(default=7 * 24 * 60, ge=1)
    session_alg: str = "HS256"
    session_issuer: str = "socialhub"
    session_audience: str = "socialhub-web"
    session_secret: str = Field(default="dev-secret-change-me", repr=False)

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./socialhub.db"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Every field can be overridden with a SOCIALHUB_-prefixed environment variable.
