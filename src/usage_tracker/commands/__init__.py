"""Subcommand modules for usage-tracker.

Provides register_commands() which imports each command module and
attaches it to the root group.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    # --- Mutating ---
    from usage_tracker.commands.add import add
    from usage_tracker.commands.clear import clear
    from usage_tracker.commands.remove import remove
    from usage_tracker.commands.use import use

    cli.add_command(add)
    cli.add_command(remove)
    cli.add_command(clear)
    cli.add_command(use)

    # --- Read-only ---
    from usage_tracker.commands.list_cmd import list_cmd
    from usage_tracker.commands.need import need
    from usage_tracker.commands.show import show

    cli.add_command(list_cmd)
    cli.add_command(show)
    cli.add_command(need)
