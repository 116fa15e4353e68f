"""Command: remove every tracked thing."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from usage_tracker.commands._base import TrackerCommand

if TYPE_CHECKING:
    from usage_tracker.commands._context import AppContext


@click.command(
    cls=TrackerCommand,
    examples=("",),
)
@click.pass_obj
def clear(app: AppContext) -> None:
    """Remove all existing things."""
    from usage_tracker.services.tracker import TrackerService

    app.emit(TrackerService(app.store).clear())
