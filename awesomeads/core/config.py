"""
Configuration helpers for the AwesomeAds backend.

Every value has a default matching the service's fixed behaviour (seed file
``db.json`` in the working directory, port 8080), so running without any
environment variables is the normal case.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    db_path: str
    host: str
    port: int
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        db_path=os.getenv("AWESOMEADS_DB_PATH") or "db.json",
        host=os.getenv("AWESOMEADS_HOST") or "0.0.0.0",
        port=_int(os.getenv("AWESOMEADS_PORT", "8080"), 8080),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
