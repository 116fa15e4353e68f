"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Owns the load-at-start / save-at-end lifecycle of
the :class:`Store` and centralizes result emission (stdout/stderr
routing + exit codes).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from usage_tracker.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from usage_tracker.config.settings import TrackerSettings
    from usage_tracker.domain.store import Store
    from usage_tracker.services.result import ServiceResult

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The store is loaded lazily on first use so ``--help`` and
    ``--version`` never touch the data file.
    """

    def __init__(self, settings: TrackerSettings) -> None:
        self.settings = settings
        self._store: Store | None = None

        from usage_tracker.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )

    @property
    def store(self) -> Store:
        """The persisted store (loaded on first access)."""
        if self._store is None:
            from usage_tracker.infrastructure.datafile import DataFileError, load_store

            try:
                self._store = load_store(self.settings.data_path)
            except DataFileError as exc:
                raise click.ClickException(str(exc)) from exc
        return self._store

    def save(self) -> None:
        """Persist the store back to the data file."""
        if self._store is None:
            return
        from usage_tracker.infrastructure.datafile import save_store

        path = self.settings.data_path
        try:
            save_store(self._store, path, backup=self.settings.backup_enabled)
        except OSError as exc:
            msg = f"Unable to write data file {path}: {exc}"
            raise click.ClickException(msg) from exc

    def emit(self, result: ServiceResult) -> None:
        """Persist if needed, then output a ServiceResult with exit semantics.

        * Success (``result.ok``): saves the store when the operation
          changed it, writes to stdout, returns normally. Warnings go to
          stderr so they don't pollute piped output.
        * Failure: nothing is saved; writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            utc=self.settings.display_utc,
            time_format=self.settings.display.time_format,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            if result.changed:
                self.save()
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            logger.debug("%s failed: %s", result.op, result.error)
            click.echo(output, err=True)
            raise SystemExit(1)
