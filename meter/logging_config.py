"""Logging configuration for speedcheck."""
from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(verbose: bool = False) -> None:
    """Route log records through ``rich`` on stderr.

    WARNING and above by default; ``verbose`` drops the threshold to DEBUG
    so the meters' request/byte/elapsed records become visible.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                show_path=False,
                rich_tracebacks=True,
            )
        ],
        force=True,
    )

    # aiohttp is chatty at DEBUG; keep it at the default threshold.
    logging.getLogger("aiohttp").setLevel(max(level, logging.INFO))

    logging.getLogger(__name__).debug(
        "Logging configured: level=%s", logging.getLevelName(level)
    )
