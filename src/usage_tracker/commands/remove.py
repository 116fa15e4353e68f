"""Command: stop tracking a thing (drops its whole history)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from usage_tracker.commands._base import TrackerCommand

if TYPE_CHECKING:
    from usage_tracker.commands._context import AppContext


@click.command(
    cls=TrackerCommand,
    examples=("milk",),
)
@click.argument("name")
@click.pass_obj
def remove(app: AppContext, name: str) -> None:
    """Remove a thing and all of its recorded usages."""
    from usage_tracker.services.tracker import TrackerService

    app.emit(TrackerService(app.store).remove(name))
