# orderdesk/config.py
"""
Runtime settings, read once from the environment (and a .env file if present)
"""

import logging
import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

# Load the environment variables
load_dotenv()

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _get_bool(env_name: str, default: bool = False) -> bool:
    val = os.getenv(env_name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_list(env_name: str, default: str) -> List[str]:
    raw = os.getenv(env_name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class Settings:
    # App
    APP_TITLE: str = os.getenv("APP_TITLE", "OrderDesk")
    APP_VERSION: str = os.getenv("APP_VERSION", "0.1.0")
    APP_HOST: str = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT: int = int(os.getenv("APP_PORT", "8000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS: List[str] = field(default_factory=lambda: _get_list("CORS_ORIGINS", "*"))

    # Database (SQLite file next to the project by default)
    DATABASE_URL: str = os.getenv(
        "DATABASE_URL", f"sqlite:///{os.path.join(BASE_DIR, 'orderdesk.db')}"
    )
    DB_ECHO: bool = _get_bool("DB_ECHO", False)


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
