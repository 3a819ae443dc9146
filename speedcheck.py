#!/usr/bin/env python3
"""
Speedcheck -- ping, download and upload speed from the terminal.

Usage::

    python speedcheck.py              # rich console output with progress bars
    python speedcheck.py --simple     # plain text
    python speedcheck.py --json       # JSON to stdout
    python speedcheck.py --verbose    # debug logging and tracebacks
"""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Optional

from meter.config import Settings
from meter.download import DownloadTester
from meter.latency import LatencyTester
from meter.logging_config import configure_logging
from meter.report import SpeedtestReport
from meter.stats import format_latency, format_speed
from meter.upload import UploadTester
from ui.dashboard import (
    ProgressDisplay,
    console,
    err_console,
    print_final_results,
    print_header,
    print_latency_details,
    print_phase_result,
    print_section,
)
from ui.output import create_result_json, format_text_result

logger = logging.getLogger("speedcheck")


# ---------------------------------------------------------------------------
# Core test runner
# ---------------------------------------------------------------------------

async def run_speedtest(
    settings: Optional[Settings] = None,
    *,
    json_output: bool = False,
    simple: bool = False,
) -> SpeedtestReport:
    """Run ping, download and upload in order and report the results.

    Any network or HTTP error propagates out of the phase that hit it and
    the later phases are not run.
    """
    settings = settings or Settings()
    show_ui = not json_output and not simple

    if show_ui:
        print_header()

    # -- Ping ---------------------------------------------------------------
    if show_ui:
        print_section("Testing Ping...")

    latency = await LatencyTester(settings).test()

    if show_ui:
        print_phase_result("Average Ping", format_latency(latency.mean_ms))
        print_latency_details(latency)

    # -- Download -----------------------------------------------------------
    dl_tester = DownloadTester(settings)
    if show_ui:
        print_section("Testing Download Speed...")
        progress = ProgressDisplay()
        dl_tester.on_progress = progress.update
        progress.start("Downloading")
        try:
            dl_result = await dl_tester.test()
        finally:
            progress.stop()
        print_phase_result("Download Speed", format_speed(dl_result.speed_mbps))
    else:
        dl_result = await dl_tester.test()

    # -- Upload -------------------------------------------------------------
    ul_tester = UploadTester(settings)
    if show_ui:
        print_section("Testing Upload Speed...")
        progress = ProgressDisplay()
        ul_tester.on_progress = progress.update
        progress.start("Uploading")
        try:
            ul_result = await ul_tester.test()
        finally:
            progress.stop()
        print_phase_result("Upload Speed", format_speed(ul_result.speed_mbps))
    else:
        ul_result = await ul_tester.test()

    # -- Summary ------------------------------------------------------------
    report = SpeedtestReport(
        ping_ms=latency.mean_ms,
        download_mbps=dl_result.speed_mbps,
        upload_mbps=ul_result.speed_mbps,
    )
    logger.debug("Report: %s", report.to_dict())

    if show_ui:
        print_final_results(report)
    elif simple:
        print(format_text_result(report))
    else:
        result_json = create_result_json(
            report,
            settings=settings.to_dict(),
            latency_results=latency.to_dict(),
            download_results=dl_result.to_dict(),
            upload_results=ul_result.to_dict(),
        )
        print(json.dumps(result_json, indent=2))

    return report


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Speedcheck -- measure ping, download and upload speed",
    )
    parser.add_argument("--json", "-j", action="store_true", help="Output results as JSON")
    parser.add_argument("--simple", "-s", action="store_true", help="Plain text output (no progress bars)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging and full tracebacks")
    return parser


def main(argv: Optional[list] = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    # Keep stdout pure JSON in --json mode
    messages = err_console if args.json else console

    try:
        asyncio.run(run_speedtest(json_output=args.json, simple=args.simple))
    except KeyboardInterrupt:
        messages.print("\n[yellow]Test cancelled by user[/yellow]")
        sys.exit(1)
    except Exception as exc:
        if args.verbose:
            messages.print_exception()
        messages.print(f"\n[red]Error: {exc or type(exc).__name__}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
