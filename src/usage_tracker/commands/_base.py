"""Click base classes that carry worked examples for each command.

Examples are written as the arguments that follow the command on the
command line (``("milk", '"coffee beans"')`` for ``add``). They are
expanded to full ``usage-tracker ...`` invocations for ``--examples``,
and the first one is shown at the bottom of ``--help``.
"""

from __future__ import annotations

from typing import Any

import click

PROG_NAME = "usage-tracker"


def invocation_prefix(ctx: click.Context) -> str:
    """Return the command as a user would type it, e.g. ``usage-tracker need``.

    The root context's info name depends on how the CLI was launched
    (``cli`` under CliRunner, a path under ``python -m``), so it is
    replaced by the installed script name.
    """
    return " ".join([PROG_NAME, *ctx.command_path.split()[1:]])


class ExamplesMixin:
    """Adds an eager ``--examples`` flag and a one-line example epilog."""

    examples: tuple[str, ...]

    def _init_examples(self, examples: tuple[str, ...]) -> None:
        self.examples = examples
        if not examples:
            return
        self.params.append(  # type: ignore[attr-defined]
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=self._show_examples,
                help="Show usage examples and exit.",
            )
        )

    def example_lines(self, ctx: click.Context) -> list[str]:
        prefix = invocation_prefix(ctx)
        return [f"{prefix} {args}".rstrip() for args in self.examples]

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{invocation_prefix(ctx)}':\n")
        for line in self.example_lines(ctx):
            click.echo(f"  {line}")
        ctx.exit(0)

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        super().format_epilog(ctx, formatter)  # type: ignore[misc]
        if not self.examples:
            return
        formatter.write_paragraph()
        formatter.write_text(f"Example: {self.example_lines(ctx)[0]}")
        if len(self.examples) > 1:
            formatter.write_text("More with --examples.")


class TrackerCommand(ExamplesMixin, click.Command):
    """Click command accepting an ``examples`` tuple."""

    def __init__(self, *args: Any, examples: tuple[str, ...] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class TrackerGroup(ExamplesMixin, click.Group):
    """Root group; subcommands default to :class:`TrackerCommand`."""

    command_class = TrackerCommand

    def __init__(self, *args: Any, examples: tuple[str, ...] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
