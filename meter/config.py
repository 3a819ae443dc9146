"""
Immutable run settings.

Every tester receives a ``Settings`` instance at construction instead of
reading module globals, so tests can point the meters at local endpoints
and shrink the payload without touching process-wide state::

    settings = Settings(download_url="http://127.0.0.1:8080/blob")
    DownloadTester(settings)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .constants import (
    COMMON_HEADERS,
    DEFAULT_PING_COUNT,
    DOWNLOAD_FALLBACK_TOTAL,
    DOWNLOAD_URL,
    MIN_PING_COUNT,
    PING_URL,
    UPLOAD_FILL,
    UPLOAD_SIZE,
    UPLOAD_URL,
)


@dataclass(frozen=True)
class Settings:
    """Endpoints, sample counts and sizes for one speedtest run."""

    ping_url: str = PING_URL
    download_url: str = DOWNLOAD_URL
    upload_url: str = UPLOAD_URL
    ping_count: int = DEFAULT_PING_COUNT
    upload_size: int = UPLOAD_SIZE
    upload_fill: bytes = UPLOAD_FILL
    fallback_total: int = DOWNLOAD_FALLBACK_TOTAL
    timeout: Optional[float] = None   # seconds; None waits forever
    # (name, value) pairs so the settings stay hashable
    headers: Tuple[Tuple[str, str], ...] = tuple(COMMON_HEADERS.items())

    def __post_init__(self) -> None:
        _validate(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ping_url": self.ping_url,
            "download_url": self.download_url,
            "upload_url": self.upload_url,
            "ping_count": self.ping_count,
            "upload_size": self.upload_size,
            "fallback_total": self.fallback_total,
        }


def _validate(settings: Settings) -> None:
    """Raise ``ValueError`` if any value is out of range."""
    if settings.ping_count < MIN_PING_COUNT:
        raise ValueError(f"Ping count must be at least {MIN_PING_COUNT}")
    if settings.upload_size < 1:
        raise ValueError("Upload size must be at least 1 byte")
    if len(settings.upload_fill) != 1:
        raise ValueError("Upload fill must be exactly one byte")
    if settings.fallback_total < 1:
        raise ValueError("Fallback download total must be at least 1 byte")
    if settings.timeout is not None and settings.timeout <= 0:
        raise ValueError("Timeout must be positive")
    for name in ("ping_url", "download_url", "upload_url"):
        if not getattr(settings, name):
            raise ValueError(f"{name} must not be empty")
