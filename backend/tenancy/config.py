"""Typed settings configuration - single source of truth."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Central registry database
    database_url: str = "sqlite+aiosqlite:///central.db"
    echo_sql: bool = False

    # Tenant stores
    tenant_store_dir: str = "."
    tenant_header: str = "X-Tenant-ID"
    seed_kindergartens: bool = True

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
