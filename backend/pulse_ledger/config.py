"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - HOST / PORT default to 127.0.0.1:8080; a .env file is read when present

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "127.0.0.1"
    port: int = Field(8080, ge=1, le=65535)

    # Ledger
    genesis_payload: int = 0

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        """LOG_LEVEL is case-insensitive; aliases such as WARN are rejected."""
        return v.upper() if isinstance(v, str) else v

    @field_validator("host", mode="before")
    @classmethod
    def strip_host(cls, v: str) -> str:
        """Empty HOST falls back to loopback."""
        if isinstance(v, str):
            v = v.strip()
            return v or "127.0.0.1"
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
