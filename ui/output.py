"""
Output formatting -- JSON document and plain text.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from meter.report import SpeedtestReport


def create_result_json(
    report: SpeedtestReport,
    settings: Optional[Dict[str, Any]] = None,
    latency_results: Optional[Dict[str, Any]] = None,
    download_results: Optional[Dict[str, Any]] = None,
    upload_results: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Build the ``--json`` document from the report, settings and per-phase dicts."""
    latency_results = latency_results or {}
    download_results = download_results or {}
    upload_results = upload_results or {}
    settings = settings or {}

    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "ping": round(report.ping_ms, 2),
        "download": round(report.download_mbps, 2),
        "upload": round(report.upload_mbps, 2),
        "settings": settings,
        "latency": {
            "url": latency_results.get("url", ""),
            "samples": latency_results.get("samples", []),
            "min": latency_results.get("min_ms", 0),
            "max": latency_results.get("max_ms", 0),
        },
        "transfer": {
            "download": {
                "bytes": download_results.get("bytes_total", 0),
                "duration_ms": download_results.get("duration_ms", 0),
            },
            "upload": {
                "bytes": upload_results.get("bytes_total", 0),
                "duration_ms": upload_results.get("duration_ms", 0),
                "status": upload_results.get("status", 0),
            },
        },
    }


def format_text_result(report: SpeedtestReport) -> str:
    mid = "-" * 25
    return (
        f"Final Results\n"
        f"{mid}\n"
        f"Ping: {report.ping_ms:.2f} ms\n"
        f"Download: {report.download_mbps:.2f} Mbps\n"
        f"Upload: {report.upload_mbps:.2f} Mbps\n"
        f"{mid}"
    )
