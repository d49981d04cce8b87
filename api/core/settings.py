"""
Environment-backed settings.

Values are read when called; the lifespan reads them once per process.
"""

from __future__ import annotations

import logging
import os


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return url


def pool_min_size() -> int:
    return max(0, _env_int("DB_POOL_MIN_SIZE", 1))


def pool_max_size() -> int:
    # Never smaller than min_size, asyncpg rejects that.
    return max(1, pool_min_size(), _env_int("DB_POOL_MAX_SIZE", 5))


def command_timeout() -> float:
    return _env_float("DB_COMMAND_TIMEOUT", 30.0)


def host() -> str:
    return os.environ.get("HOST", "127.0.0.1").strip() or "127.0.0.1"


def port() -> int:
    return _env_int("PORT", 8000)


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def configure_logging() -> None:
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
