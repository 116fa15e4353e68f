"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``USAGE_TRACKER_*`` prefix
  3. TOML file    — ``config.toml`` in the app directory
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` fed by
:func:`usage_tracker.config.discovery.find_config`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from usage_tracker.config.discovery import default_data_file, find_config
from usage_tracker.config.models import DisplayConfig, StorageConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a TOML config file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class TrackerSettings(BaseSettings):
    """Unified settings for the usage-tracker CLI.

    Merges CLI flags, environment variables, TOML config sections, and
    code-baked defaults into a single frozen object held by the
    :class:`~usage_tracker.commands._context.AppContext`.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        data_file: Explicit ``--data-file`` override; wins over
            ``[storage] data_file``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "USAGE_TRACKER_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    data_file: Path | None = None
    no_backup: bool = False
    utc: bool = False

    # --- TOML sections ---
    storage: StorageConfig = Field(default_factory=StorageConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @property
    def data_path(self) -> Path:
        """Resolved location of the data file."""
        path = self.data_file or self.storage.data_file or default_data_file()
        return path.expanduser()

    @property
    def backup_enabled(self) -> bool:
        """Whether saving rotates the previous data file to a backup."""
        return self.storage.backup and not self.no_backup

    @property
    def display_utc(self) -> bool:
        """Whether timestamps are shown in UTC rather than local time."""
        return self.utc or self.display.utc

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        **cli_flags: Any,
    ) -> TrackerSettings:
        """Construct settings from a CLI invocation.

        Uses the explicit *config_path* when given, otherwise discovers the
        config file. Flags left unset (None) or off (False) are dropped so
        they do not shadow env vars or TOML values; a CLI flag can only
        switch a setting on.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if not p.is_file():
                msg = f"Config file not found: {p}"
                raise click.ClickException(msg)
            toml_path = p
        else:
            toml_path = find_config()

        flags = {
            key: value
            for key, value in cli_flags.items()
            if value is not None and value is not False
        }

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **flags)
        finally:
            _tls.toml_path = None
