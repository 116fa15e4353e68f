"""Shared pytest fixtures and test helpers for usage-tracker tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from click.testing import CliRunner

from usage_tracker.domain.store import Store

T0 = datetime(2024, 3, 1, 12, 0, 0, tzinfo=UTC)


class FakeClock:
    """Deterministic clock for Store.record_usage."""

    def __init__(self, start: datetime = T0) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> Store:
    """Empty store driven by the fake clock."""
    return Store(clock=clock)


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """Location of the isolated data file (not created)."""
    return tmp_path / "data" / "default.json"


@pytest.fixture(autouse=True)
def _isolated_env(
    tmp_path: Path, data_file: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Point config discovery and the data file at the temp directory."""
    for var in (
        "USAGE_TRACKER_DATA_FILE",
        "USAGE_TRACKER_NO_BACKUP",
        "USAGE_TRACKER_UTC",
        "USAGE_TRACKER_STORAGE__BACKUP",
        "USAGE_TRACKER_DISPLAY__UTC",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("USAGE_TRACKER_CONFIG", str(tmp_path / "no-config.toml"))
    monkeypatch.setenv("USAGE_TRACKER_STORAGE__DATA_FILE", str(data_file))


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo the handler swap performed by configure_logging()."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("usage_tracker")
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def write_data(path: Path, things: dict[str, list[datetime]]) -> None:
    """Write a data file containing *things* with the given usages."""
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "version": 1,
        "objects": {
            name: {"name": name, "usages": [ts.isoformat() for ts in usages]}
            for name, usages in things.items()
        },
    }
    path.write_text(json.dumps(payload), encoding="utf-8")


def read_data(path: Path) -> dict[str, list[str]]:
    """Read a data file back as ``{name: [iso, ...]}``."""
    payload = json.loads(path.read_text(encoding="utf-8"))
    return {name: obj["usages"] for name, obj in payload["objects"].items()}
