"""Root CLI group for usage-tracker with global flags and command registration."""

from __future__ import annotations

import click

from usage_tracker import __version__
from usage_tracker.commands import register_commands
from usage_tracker.commands._base import TrackerGroup
from usage_tracker.commands._context import AppContext
from usage_tracker.config.settings import TrackerSettings


@click.group(
    cls=TrackerGroup,
    invoke_without_command=True,
    examples=(
        "add milk",
        "use milk",
        "need milk 1 week",
        "--json show milk",
        "--utc show milk",
        "-q need milk 10 d",
        "--no-backup remove milk",
        "--data-file ./pantry.json list",
    ),
)
@click.version_option(version=__version__, prog_name="usage-tracker")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logs.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False, path_type=str),
    default=None,
    help="Override the data file location.",
)
@click.option(
    "--no-backup",
    is_flag=True,
    help="Overwrite the data file on change instead of moving it to the backup location.",
)
@click.option("--utc", is_flag=True, help="Show times in UTC instead of the local timezone.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    data_file: str | None,
    no_backup: bool,
    utc: bool,
) -> None:
    """usage-tracker — track usages of things and estimate future needs."""
    settings = TrackerSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        data_file=data_file,
        no_backup=no_backup,
        utc=utc,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
