"""Command: record a usage of a thing at the current time."""

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
def use(app: AppContext, name: str) -> None:
    """Add a new usage record to a thing."""
    from usage_tracker.services.tracker import TrackerService

    app.emit(TrackerService(app.store).use(name))
