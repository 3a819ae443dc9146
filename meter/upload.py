"""
Upload speed test module.

Uses a single HTTPS POST carrying a fixed in-memory payload.
"""
import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

import aiohttp

from .config import Settings
from .stats import bits_to_mbps

logger = logging.getLogger(__name__)


def build_payload(size: int, fill: bytes) -> bytes:
    """Return *size* bytes of the repeated *fill* byte."""
    return fill * size


@dataclass
class UploadResult:
    """Upload test result."""
    speed_mbps: float = 0.0
    bytes_total: int = 0
    duration_ms: float = 0.0
    status: int = 0

    def calculate(self):
        """Calculate final speed."""
        self.speed_mbps = bits_to_mbps(self.bytes_total * 8, self.duration_ms / 1000)

    def to_dict(self) -> dict:
        return {
            "speed_mbps": round(self.speed_mbps, 2),
            "bytes_total": self.bytes_total,
            "duration_ms": round(self.duration_ms, 2),
            "status": self.status,
        }


class UploadTester:
    """
    Upload speed tester.

    The request goes out as one blocking operation, so the progress
    callback only sees 0% before the exchange and 100% after it.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        clock: Callable[[], float] = time.perf_counter,
    ):
        self.settings = settings or Settings()
        self.clock = clock
        self.on_progress: Optional[Callable[[float, float], None]] = None

    async def test(self) -> UploadResult:
        """Perform upload speed test."""
        settings = self.settings
        payload = build_payload(settings.upload_size, settings.upload_fill)

        headers = {
            **dict(settings.headers),
            "Content-Type": "application/octet-stream",
            "Content-Length": str(len(payload)),
        }
        timeout = aiohttp.ClientTimeout(total=settings.timeout)

        if self.on_progress:
            self.on_progress(0.0, 0.0)

        async with aiohttp.ClientSession(timeout=timeout) as session:
            start = self.clock()
            async with session.post(settings.upload_url, data=payload, headers=headers) as response:
                response.raise_for_status()
                # Drain the echo so server processing is inside the timing
                await response.read()
            elapsed = self.clock() - start

        result = UploadResult(
            bytes_total=len(payload),
            duration_ms=elapsed * 1000,
            status=response.status,
        )
        result.calculate()

        logger.debug(
            "Uploaded %d bytes in %.1f ms (%.2f Mbps)",
            result.bytes_total,
            result.duration_ms,
            result.speed_mbps,
        )

        if self.on_progress:
            self.on_progress(100.0, result.speed_mbps)

        return result
