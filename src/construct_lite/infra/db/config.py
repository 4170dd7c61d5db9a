from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PoolSettings:
    pool_size: int = 10
    max_overflow: int = 20
    pool_recycle_seconds: int = 3600


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None


def pool_settings() -> PoolSettings:
    """Connection pool sizing, overridable through DB_POOL_* variables."""
    defaults = PoolSettings()
    return PoolSettings(
        pool_size=_int_env("DB_POOL_SIZE", defaults.pool_size),
        max_overflow=_int_env("DB_MAX_OVERFLOW", defaults.max_overflow),
        pool_recycle_seconds=_int_env("DB_POOL_RECYCLE_SECONDS", defaults.pool_recycle_seconds),
    )
