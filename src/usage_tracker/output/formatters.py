"""Output mode dispatch.

The CLI renders ServiceResult for humans (Rich), for scripts (--quiet),
or for machines (--json). :func:`format_result` picks the mode from
:class:`OutputSettings`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from usage_tracker.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from usage_tracker.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Rendering options derived from the CLI settings."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    utc: bool = False
    time_format: str = "%Y-%m-%d %H:%M:%S %Z"


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON mode wins over quiet mode, which wins over the Rich renderers.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result, utc=settings.utc)
    return render_result(result, utc=settings.utc, time_format=settings.time_format)
