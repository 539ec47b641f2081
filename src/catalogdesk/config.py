"""Configuration loading and validation."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


@dataclass(frozen=True)
class Config:
    """Application configuration. All values sourced from environment variables."""

    # Storage
    database_path: str = "./users.db"

    # Command surface
    web_host: str = "127.0.0.1"
    web_port: int = 8080

    # Application
    log_level: str = "INFO"
    log_format: str = "json"
    app_env: str = "production"


_LOG_FORMATS = ("json", "text")


def load_config(env_path: str | Path | None = None) -> Config:
    """Load configuration from environment variables.

    Loads a .env file if present (for local development). Every variable is
    optional; raises ValueError listing any variables with invalid values.
    """
    load_dotenv(dotenv_path=env_path)

    invalid = []

    raw_port = os.environ.get("WEB_PORT", "8080")
    try:
        web_port = int(raw_port)
    except ValueError:
        web_port = -1
    if not 0 < web_port < 65536:
        invalid.append(f"WEB_PORT={raw_port!r}")

    log_format = os.environ.get("LOG_FORMAT", "json").lower()
    if log_format not in _LOG_FORMATS:
        invalid.append(f"LOG_FORMAT={log_format!r}")

    if invalid:
        raise ValueError(
            f"Invalid environment variables: {', '.join(invalid)}"
        )

    return Config(
        database_path=os.environ.get("DATABASE_PATH") or "./users.db",
        web_host=os.environ.get("WEB_HOST", "127.0.0.1"),
        web_port=web_port,
        log_level=os.environ.get("LOG_LEVEL", "INFO"),
        log_format=log_format,
        app_env=os.environ.get("APP_ENV", "production"),
    )
