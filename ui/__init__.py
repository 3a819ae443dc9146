"""UI layer -- Rich console presentation and output formatters."""

from .dashboard import (
    ProgressDisplay,
    console,
    err_console,
    print_final_results,
    print_header,
    print_latency_details,
    print_phase_result,
    print_section,
)
from .output import create_result_json, format_text_result

__all__ = [
    "ProgressDisplay",
    "console",
    "create_result_json",
    "err_console",
    "format_text_result",
    "print_final_results",
    "print_header",
    "print_latency_details",
    "print_phase_result",
    "print_section",
]
