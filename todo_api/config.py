"""Runtime settings for the Todo API.

Values come from environment variables, optionally loaded from a ``.env``
file in the working directory:

- DATABASE_URL   SQLAlchemy async URL (default ``sqlite+aiosqlite:///./todo.db``)
- APP_TITLE      OpenAPI / docs title (default ``Todo API``)
- HOST, PORT     listener address for ``todo-api`` (default ``0.0.0.0:3000``)
- LOG_LEVEL      root log level name (default ``INFO``)
- SQL_ECHO       ``1/true/yes/on`` turns on SQLAlchemy statement echo
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./todo.db"
DEFAULT_PORT = 3000

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    database_url: str
    title: str
    host: str
    port: int
    log_level: str
    sql_echo: bool


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid integer env value %s=%r, using default=%s", name, raw, default)
        return default
    if value <= 0 or value > 65535:
        logger.warning("Out of range env value %s=%s, using default=%s", name, value, default)
        return default
    return value


@lru_cache
def get_settings() -> Settings:
    load_dotenv()
    return Settings(
        database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
        title=os.getenv("APP_TITLE", "").strip() or "Todo API",
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int_env("PORT", DEFAULT_PORT),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        sql_echo=os.getenv("SQL_ECHO", "").strip().lower() in _TRUTHY,
    )
