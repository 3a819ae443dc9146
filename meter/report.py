"""The three headline numbers of a finished run."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class SpeedtestReport:
    """Final ping / download / upload figures, owned by the reporter."""

    ping_ms: float
    download_mbps: float
    upload_mbps: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ping_ms": round(self.ping_ms, 2),
            "download_mbps": round(self.download_mbps, 2),
            "upload_mbps": round(self.upload_mbps, 2),
        }
