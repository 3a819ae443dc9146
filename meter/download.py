"""
Download speed test module.

One GET against ``Settings.download_url``.  The response body is pulled
as an async sequence of chunks; every chunk updates a ``TransferProgress``
and fires the progress callback.  The final speed is total bytes received
over total elapsed time, so it does not depend on how the body was split.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import AsyncIterable, Callable, Optional

import aiohttp

from .config import Settings
from .stats import TransferProgress, bits_to_mbps

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

@dataclass
class DownloadResult:
    """Download test result."""

    speed_mbps: float = 0.0
    bytes_total: int = 0
    duration_ms: float = 0.0
    expected_total: int = 0

    def calculate(self) -> None:
        """Derive speed from total bytes and wall-clock duration."""
        self.speed_mbps = bits_to_mbps(self.bytes_total * 8, self.duration_ms / 1000)

    def to_dict(self) -> dict:
        return {
            "speed_mbps": round(self.speed_mbps, 2),
            "bytes_total": self.bytes_total,
            "duration_ms": round(self.duration_ms, 2),
            "expected_total": self.expected_total,
        }


# ---------------------------------------------------------------------------
# Tester
# ---------------------------------------------------------------------------

class DownloadTester:
    """
    Single-stream download speed tester.

    ``on_progress(percent, mbps)`` is called once per received chunk with
    the percentage of the expected size (capped at 100) and the running
    throughput since the first byte was requested from the body.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.settings = settings or Settings()
        self.clock = clock
        self.on_progress: Optional[Callable[[float, float], None]] = None

    async def test(self) -> DownloadResult:
        settings = self.settings
        timeout = aiohttp.ClientTimeout(total=settings.timeout)

        async with aiohttp.ClientSession(
            headers=dict(settings.headers),
            timeout=timeout,
        ) as session:
            async with session.get(settings.download_url) as resp:
                resp.raise_for_status()
                expected = resp.content_length
                if expected is None:
                    logger.debug(
                        "No Content-Length; assuming %d bytes for progress",
                        settings.fallback_total,
                    )
                    expected = settings.fallback_total
                return await self.measure(resp.content.iter_any(), expected)

    async def measure(
        self,
        chunks: AsyncIterable[bytes],
        expected_total: int,
    ) -> DownloadResult:
        """Consume *chunks* to exhaustion and time the transfer."""
        progress = TransferProgress(expected_total=expected_total, started_at=self.clock())

        async for chunk in chunks:
            progress.advance(len(chunk), self.clock())
            if self.on_progress:
                self.on_progress(progress.percent, progress.speed_mbps)

        result = DownloadResult(
            bytes_total=progress.bytes_transferred,
            duration_ms=(self.clock() - progress.started_at) * 1000,
            expected_total=expected_total,
        )
        result.calculate()

        logger.debug(
            "Downloaded %d bytes in %.1f ms (%.2f Mbps)",
            result.bytes_total,
            result.duration_ms,
            result.speed_mbps,
        )
        return result
