"""
Throughput and latency arithmetic.

Pure functions and lightweight dataclasses -- no I/O, no side effects.
Everything here is deterministic and easy to unit-test.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .constants import BITS_PER_MEGABIT


# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------

@dataclass
class TransferProgress:
    """Running state of one transfer, updated once per chunk."""

    expected_total: int
    started_at: float
    bytes_transferred: int = 0
    elapsed_seconds: float = 0.0
    speed_mbps: float = 0.0

    def advance(self, nbytes: int, now: float) -> None:
        if nbytes < 0:
            raise ValueError("Chunk length cannot be negative")
        self.bytes_transferred += nbytes
        self.elapsed_seconds = now - self.started_at
        self.speed_mbps = bits_to_mbps(self.bytes_transferred * 8, self.elapsed_seconds)

    @property
    def percent(self) -> float:
        return percent_complete(self.bytes_transferred, self.expected_total)


# ---------------------------------------------------------------------------
# Pure helper functions
# ---------------------------------------------------------------------------

def bits_to_mbps(bits: float, seconds: float) -> float:
    """Binary megabits per second: ``bits / seconds / 1_048_576``."""
    if seconds <= 0:
        return 0.0
    return bits / seconds / BITS_PER_MEGABIT


def calculate_mean(samples: List[float]) -> float:
    """Arithmetic mean; an empty list is an error, not zero."""
    if not samples:
        raise ValueError("Cannot average an empty sample list")
    return sum(samples) / len(samples)


def percent_complete(done: int, total: int) -> float:
    """Share of *total* reached, clamped to 100."""
    if total <= 0:
        return 100.0
    return min(done / total * 100, 100.0)


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def format_speed(speed_mbps: float) -> str:
    return f"{speed_mbps:.2f} Mbps"


def format_latency(latency_ms: float) -> str:
    return f"{latency_ms:.2f} ms"
