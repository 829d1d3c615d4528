"""Application configuration and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.environ.get(name, "")
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _default_registry_url() -> str:
    return os.environ.get("UPDOCK_REGISTRY_URL", "").rstrip("/") or "https://hub.docker.com"


def _default_page_size() -> int:
    # Docker Hub caps page_size at 100
    return _env_int("UPDOCK_PAGE_SIZE", 100)


def _default_timeout() -> float:
    raw = os.environ.get("UPDOCK_TIMEOUT", "")
    if not raw:
        return 30.0
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"UPDOCK_TIMEOUT must be a number, got {raw!r}") from None


def _default_max_tags() -> int | None:
    return _env_int("UPDOCK_MAX_TAGS", None)


def _default_log_level() -> str:
    return os.environ.get("UPDOCK_LOG", "").upper() or "WARNING"


@dataclass
class Settings:
    registry_url: str = field(default_factory=_default_registry_url)
    page_size: int = field(default_factory=_default_page_size)
    request_timeout: float = field(default_factory=_default_timeout)
    max_tags: int | None = field(default_factory=_default_max_tags)
    log_level: str = field(default_factory=_default_log_level)
    default_output: str = "table"
    pattern_comment: str = "updock pattern:"
    pattern_label: str = "updock.pattern"


# Global singleton
settings = Settings()
