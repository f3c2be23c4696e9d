"""
shiptivity.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    - Env-driven configuration (prefix `SHIPTIVITY_`)
    - Defaults safe for local dev
    - Single settings object injected across layers
    """

    model_config = SettingsConfigDict(env_prefix="SHIPTIVITY_", case_sensitive=False)

    # Environment controls toggle behavior like auto-init DB tables.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "shiptivity"
    log_level: str = "INFO"
    # "console" is easier to read locally; deployed environments keep JSON.
    log_format: Literal["json", "console"] = "json"

    api_host: str = "0.0.0.0"
    api_port: int = 3001

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./clients.db"

    # Optional JSON file of clients loaded into an empty table on startup.
    seed_file: str | None = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Every layer reads configuration through `Settings`; nothing reads os.environ directly
# except the Alembic environment.
