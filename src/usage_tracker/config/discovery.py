"""Config file and data directory discovery.

The config file lives in the per-user application directory reported by
Click, next to the default data file. ``USAGE_TRACKER_CONFIG`` and the
``--config`` flag override its location.
"""

from __future__ import annotations

import os
from pathlib import Path

import click

APP_NAME = "usage-tracker"
CONFIG_FILENAME = "config.toml"
CONFIG_ENV_VAR = "USAGE_TRACKER_CONFIG"
DEFAULT_DATA_FILENAME = "default.json"


def app_dir() -> Path:
    """Per-user application directory (may not exist yet)."""
    return Path(click.get_app_dir(APP_NAME))


def default_data_file() -> Path:
    """Where the store is persisted when nothing else is configured."""
    return app_dir() / DEFAULT_DATA_FILENAME


def find_config() -> Path | None:
    """Locate the config file.

    Checks ``USAGE_TRACKER_CONFIG`` first; an env path that is not a file
    disables discovery rather than falling back. Returns None if no file
    is found.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    candidate = app_dir() / CONFIG_FILENAME
    if candidate.is_file():
        return candidate
    return None
