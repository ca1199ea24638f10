"""Environment configuration for sorted_bounds."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

VALIDATE_ENV = "SORTED_BOUNDS_VALIDATE"
LOG_LEVEL_ENV = "SORTED_BOUNDS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    validate: bool
    log_level: int


def _raw_getenv(key: str, default: str = "") -> str:
    try:
        return os.getenv(key, default)
    except Exception:
        return default


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() in _TRUTHY


def parse_log_level(raw: str, default: int = DEFAULT_LOG_LEVEL) -> int:
    stripped = raw.strip()
    if not stripped:
        return default
    if stripped.isdigit():
        return int(stripped)
    level = logging.getLevelName(stripped.upper())
    if isinstance(level, int):
        return level
    return default


_VALIDATE_CACHE: bool | None = None
_VALIDATE_RAW: str | None = None
_LEVEL_CACHE: int | None = None
_LEVEL_RAW: str | None = None


def validate_default() -> bool:
    global _VALIDATE_CACHE, _VALIDATE_RAW
    raw = _raw_getenv(VALIDATE_ENV, "")
    if _VALIDATE_CACHE is None or raw != _VALIDATE_RAW:
        _VALIDATE_RAW = raw
        _VALIDATE_CACHE = _parse_bool(raw)
    return _VALIDATE_CACHE


def log_level() -> int:
    global _LEVEL_CACHE, _LEVEL_RAW
    raw = _raw_getenv(LOG_LEVEL_ENV, "")
    if _LEVEL_CACHE is None or raw != _LEVEL_RAW:
        _LEVEL_RAW = raw
        _LEVEL_CACHE = parse_log_level(raw)
    return _LEVEL_CACHE


def settings() -> Settings:
    return Settings(validate=validate_default(), log_level=log_level())
