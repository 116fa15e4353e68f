"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, the config file only contains
overrides. No config file at all is a valid setup.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class StorageConfig(BaseModel):
    """[storage] section."""

    model_config = {"frozen": True}

    data_file: Path | None = None
    backup: bool = True


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    utc: bool = False
    time_format: str = "%Y-%m-%d %H:%M:%S %Z"
