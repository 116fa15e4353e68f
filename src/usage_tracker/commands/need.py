"""Command: estimate how much of a thing is needed over a duration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from usage_tracker.commands._base import TrackerCommand

if TYPE_CHECKING:
    from usage_tracker.commands._context import AppContext


@click.command(
    cls=TrackerCommand,
    context_settings={"ignore_unknown_options": True},
    examples=("milk 1 week", "milk 2 mo", '"coffee beans" 1 y'),
)
@click.argument("name")
@click.argument("magnitude")
@click.argument("unit")
@click.pass_obj
def need(app: AppContext, name: str, magnitude: str, unit: str) -> None:
    """Estimate how many units of a thing will be used in a time span.

    UNIT is one of second (s), minute (m, min), hour (h), day (d),
    week (w), month (mo) or year (y). Months are 30 days, years 365.
    """
    from usage_tracker.services.tracker import TrackerService

    app.emit(TrackerService(app.store).need(name, magnitude, unit))
