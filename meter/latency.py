"""
HTTP latency measurement.

Each probe is a plain GET against ``Settings.ping_url``.  A sample is the
time from issuing the request until the response headers arrive; the body
is released unread.  The connector closes every connection after use so
each probe includes its own connection setup.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

import aiohttp

from .config import Settings
from .stats import calculate_mean

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

@dataclass
class LatencyResult:
    """Latency samples for one probing run."""

    url: str = ""
    samples: List[float] = field(default_factory=list)
    mean_ms: float = 0.0

    def calculate(self) -> None:
        self.mean_ms = calculate_mean(self.samples)

    @property
    def min_ms(self) -> float:
        return min(self.samples) if self.samples else 0.0

    @property
    def max_ms(self) -> float:
        return max(self.samples) if self.samples else 0.0

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "samples": [round(s, 2) for s in self.samples],
            "mean_ms": round(self.mean_ms, 2),
            "min_ms": round(self.min_ms, 2),
            "max_ms": round(self.max_ms, 2),
        }


# ---------------------------------------------------------------------------
# Tester
# ---------------------------------------------------------------------------

class LatencyTester:
    """Sequential GET round trips; any failure aborts the whole run."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.settings = settings or Settings()
        self.clock = clock

    async def test(self) -> LatencyResult:
        settings = self.settings
        result = LatencyResult(url=settings.ping_url)

        connector = aiohttp.TCPConnector(force_close=True)
        timeout = aiohttp.ClientTimeout(total=settings.timeout)

        async with aiohttp.ClientSession(
            headers=dict(settings.headers),
            connector=connector,
            timeout=timeout,
        ) as session:
            for i in range(settings.ping_count):
                sample = await self._probe(session, settings.ping_url)
                logger.debug("Ping %d/%d: %.2f ms", i + 1, settings.ping_count, sample)
                result.samples.append(sample)

        result.calculate()
        return result

    async def _probe(self, session: aiohttp.ClientSession, url: str) -> float:
        """One round trip, in milliseconds, up to response headers."""
        start = self.clock()
        async with session.get(url) as resp:
            elapsed = self.clock() - start
            resp.raise_for_status()
        return elapsed * 1000
