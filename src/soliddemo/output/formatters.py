"""Output mode dispatch for ServiceResult.

The CLI renders ServiceResult for humans (the demo lines verbatim, or a
Rich value block with --verbose) or machines (--json). The formatter
layer adapts ServiceResult to the requested output mode.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from soliddemo.output.renderers import render_error, render_verbose

if TYPE_CHECKING:
    from soliddemo.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output flags taken from the CLI."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Priority: json > quiet > verbose > default.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if not result.ok:
        if settings.verbose:
            return render_error(result)
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if settings.quiet:
        return f"OK: {result.op}"
    if settings.verbose:
        return render_verbose(result)
    return "\n".join(result.lines)
