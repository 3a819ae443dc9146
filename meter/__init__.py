"""Speedcheck measurement library -- latency, download, upload."""

from .config import Settings
from .download import DownloadResult, DownloadTester
from .latency import LatencyResult, LatencyTester
from .report import SpeedtestReport
from .stats import (
    TransferProgress,
    bits_to_mbps,
    calculate_mean,
    format_latency,
    format_speed,
    percent_complete,
)
from .upload import UploadResult, UploadTester, build_payload

__all__ = [
    "DownloadResult",
    "DownloadTester",
    "LatencyResult",
    "LatencyTester",
    "Settings",
    "SpeedtestReport",
    "TransferProgress",
    "UploadResult",
    "UploadTester",
    "bits_to_mbps",
    "build_payload",
    "calculate_mean",
    "format_latency",
    "format_speed",
    "percent_complete",
]
