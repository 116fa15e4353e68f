"""Command: list tracked things."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from usage_tracker.commands._base import TrackerCommand

if TYPE_CHECKING:
    from usage_tracker.commands._context import AppContext


@click.command(
    "list",
    cls=TrackerCommand,
    examples=("", "--usages"),
)
@click.option("--usages", "include_usages", is_flag=True, help="Also show every usage.")
@click.pass_obj
def list_cmd(app: AppContext, include_usages: bool) -> None:
    """List all existing things."""
    from usage_tracker.services.tracker import TrackerService

    app.emit(TrackerService(app.store).list_things(include_usages=include_usages))
