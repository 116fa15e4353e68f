"""Command: show the recorded usages of one thing."""

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
def show(app: AppContext, name: str) -> None:
    """List all usages of a thing."""
    from usage_tracker.services.tracker import TrackerService

    app.emit(TrackerService(app.store).show(name))
