"""
Rich-based terminal presentation for speedcheck.

All formatting helpers live in ``meter.stats`` -- this module only does
presentation via the ``rich`` library.
"""
from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.progress import (
    BarColumn,
    Progress,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table

from meter.latency import LatencyResult
from meter.report import SpeedtestReport
from meter.stats import format_latency, format_speed

console = Console()
err_console = Console(stderr=True)

_RULE = "-" * 25


# ---------------------------------------------------------------------------
# Print helpers
# ---------------------------------------------------------------------------

def print_header() -> None:
    console.print()
    console.print(
        Panel.fit(
            "[bold cyan]Internet Speed Test CLI[/bold cyan]\n"
            "[dim]Ping, download and upload against fixed endpoints[/dim]",
            border_style="cyan",
        )
    )


def print_section(title: str) -> None:
    """Blue phase header, e.g. ``Testing Ping...``."""
    console.print(f"\n[bold blue]{title}[/bold blue]")


def print_phase_result(label: str, value: str) -> None:
    console.print(f"[green]{label}: {value}[/green]")


def print_latency_details(result: LatencyResult) -> None:
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column(style="dim")
    table.add_column(justify="right")
    table.add_row("Min", format_latency(result.min_ms))
    table.add_row("Max", format_latency(result.max_ms))
    table.add_row("Samples", str(len(result.samples)))
    console.print(table)


def print_final_results(report: SpeedtestReport) -> None:
    console.print("\n[bold yellow]Final Results[/bold yellow]")
    console.print(_RULE)
    console.print(f"Ping: {format_latency(report.ping_ms)}")
    console.print(f"Download: {format_speed(report.download_mbps)}")
    console.print(f"Upload: {format_speed(report.upload_mbps)}")
    console.print(_RULE)
    console.print()


# ---------------------------------------------------------------------------
# Progress display
# ---------------------------------------------------------------------------

class ProgressDisplay:
    """
    Manages a ``rich`` progress bar during download / upload tests.

    ``update`` has the ``on_progress(percent, mbps)`` shape the testers
    expect, so a bound method can be assigned directly.
    """

    def __init__(self, target: Optional[Console] = None) -> None:
        self.progress = Progress(
            TextColumn("[bold]{task.description}"),
            BarColumn(bar_width=40),
            TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
            TextColumn("|"),
            TextColumn("[bold cyan]{task.fields[speed]}[/bold cyan]"),
            TimeElapsedColumn(),
            console=target or console,
        )
        self._task_id = None
        self._shown = (0.0, 0.0)
        self._latest = (0.0, 0.0)

    def start(self, description: str) -> None:
        self.progress.start()
        self._task_id = self.progress.add_task(
            description, total=100, speed=format_speed(0.0)
        )
        self._shown = (0.0, 0.0)
        self._latest = (0.0, 0.0)

    def update(self, percent: float, speed_mbps: float = 0.0) -> None:
        if self._task_id is None:
            return
        self._latest = (percent, speed_mbps)
        # Debounce: only redraw when values change noticeably
        last_pct, last_speed = self._shown
        if abs(percent - last_pct) < 1.0 and abs(speed_mbps - last_speed) < 0.5:
            return
        self._render(percent, speed_mbps)

    def stop(self) -> None:
        if self._task_id is not None and self._latest != self._shown:
            self._render(*self._latest)
        self.progress.stop()
        self._task_id = None

    def _render(self, percent: float, speed_mbps: float) -> None:
        self.progress.update(self._task_id, completed=percent, speed=format_speed(speed_mbps))
        self._shown = (percent, speed_mbps)
