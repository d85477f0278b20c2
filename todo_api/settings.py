"""Environment-driven settings for the todo API."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_API_PREFIX = "/api"


@dataclass(frozen=True)
class Settings:
    database_url: Optional[str]
    api_prefix: str = DEFAULT_API_PREFIX
    put_missing_no_content: bool = False
    delete_all_enabled: bool = True
    db_pool_min_size: int = 1
    db_pool_max_size: int = 5
    log_level: str = "INFO"

    @property
    def storage_backend(self) -> str:
        return "postgres" if self.database_url else "document"


def parse_bool_env(value: Optional[str]) -> Optional[bool]:
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized in {"true", "1", "yes", "on"}:
        return True
    if normalized in {"false", "0", "no", "off"}:
        return False
    return None


def parse_int_env(value: Optional[str], default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("Invalid integer env value '%s', using default=%s", value, default)
        return default


def _bool_env(name: str, default: bool) -> bool:
    raw_value = os.getenv(name)
    parsed = parse_bool_env(raw_value)
    if parsed is None:
        if raw_value is not None:
            logger.warning("Invalid boolean env value %s='%s', using default=%s", name, raw_value, default)
        return default
    return parsed


def _normalize_prefix(value: str) -> str:
    stripped = value.strip().strip("/")
    return f"/{stripped}" if stripped else ""


def load_settings() -> Settings:
    database_url = os.getenv("DATABASE_URL") or None
    api_prefix = _normalize_prefix(os.getenv("API_PREFIX", DEFAULT_API_PREFIX))
    min_size = max(1, parse_int_env(os.getenv("DB_POOL_MIN_SIZE"), 1))
    max_size = max(min_size, parse_int_env(os.getenv("DB_POOL_MAX_SIZE"), 5))

    return Settings(
        database_url=database_url,
        api_prefix=api_prefix,
        put_missing_no_content=_bool_env("TODO_PUT_MISSING_NO_CONTENT", False),
        delete_all_enabled=_bool_env("TODO_DELETE_ALL_ENABLED", True),
        db_pool_min_size=min_size,
        db_pool_max_size=max_size,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()
