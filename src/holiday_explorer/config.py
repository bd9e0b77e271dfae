from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv, find_dotenv

load_dotenv(find_dotenv(), override=False)

DEFAULT_API_BASE = "https://date.nager.at/api/v3"
DEFAULT_TIMEOUT = 20.0
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    api_base: str
    timeout: float
    log_level: str


def _as_timeout(value: str | None) -> float:
    if not value or not value.strip():
        return DEFAULT_TIMEOUT
    try:
        timeout = float(value)
    except ValueError:
        return DEFAULT_TIMEOUT
    return timeout if timeout > 0 else DEFAULT_TIMEOUT


def load_settings() -> Settings:
    """
    Read settings from the environment (a local .env is loaded on import).
    """
    api_base = (os.getenv("NAGER_API_BASE") or DEFAULT_API_BASE).strip().rstrip("/")
    return Settings(
        api_base=api_base,
        timeout=_as_timeout(os.getenv("HOLIDAY_API_TIMEOUT")),
        log_level=(os.getenv("HOLIDAY_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper(),
    )
