"""Command: start tracking a new thing."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from usage_tracker.commands._base import TrackerCommand

if TYPE_CHECKING:
    from usage_tracker.commands._context import AppContext


@click.command(
    cls=TrackerCommand,
    examples=("milk", '"coffee beans"'),
)
@click.argument("name")
@click.pass_obj
def add(app: AppContext, name: str) -> None:
    """Add a new thing to keep track of."""
    from usage_tracker.services.tracker import TrackerService

    app.emit(TrackerService(app.store).add(name))
