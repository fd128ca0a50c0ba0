"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets (admin password, Telegram credentials) come from environment variables
    - get_settings() is cached (lru_cache): one instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: a bare checkout boots against ./pets.db
"""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = 5000

    # Database: a single SQLite file
    database_url: str = "sqlite+aiosqlite:///./pets.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_sqlite_url(cls, v: str) -> str:
        """Plain sqlite:// URLs need the aiosqlite driver for the async engine."""
        if isinstance(v, str) and v.startswith("sqlite://"):
            return v.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return v

    seed_on_startup: bool = True
    reset_pets_on_startup: bool = False

    # Admin
    admin_password: str = ""
    admin_auth_required: bool = True
    admin_session_ttl_minutes: int = 720

    # Outbound services
    telegram_bot_token: str = ""
    telegram_chat_id: str = ""
    telegram_api_base: str = "https://api.telegram.org"
    ip_lookup_url: str = "https://api64.ipify.org?format=json"
    outbound_timeout_seconds: float = 10.0

    # Static assets
    upload_dir: Path = Path("public/images")
    frontend_dir: Path = Path("build")

    # API
    cors_origins: list[str] = ["*"]
    trusted_proxies: list[str] = ["127.0.0.1", "::1"]
    # Empty: the HTML views call the API in-process
    api_base_url: str = ""

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
