"""JSON data file holding the persisted :class:`Store`.

Lifecycle: :func:`load_store` once at startup, :func:`save_store` once
after a mutating command succeeds. A missing file means "no prior
state" and yields an empty Store.

On save the previous file is rotated to ``<name>.bak`` unless backups
are disabled, so the last state before any change can be restored by
hand.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from usage_tracker.domain.store import Store, StoreSnapshot

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = ".bak"


class DataFileError(Exception):
    """The data file exists but cannot be used."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path


def backup_path_for(path: Path) -> Path:
    """``default.json`` -> ``default.json.bak``."""
    return path.with_name(path.name + BACKUP_SUFFIX)


def load_store(path: Path) -> Store:
    """Read and validate the data file at *path*.

    Raises:
        DataFileError: *path* is not a regular file, cannot be read, or
            does not contain a valid snapshot.
    """
    if not path.exists():
        logger.debug("No data file at %s; starting empty", path)
        return Store()
    if not path.is_file():
        msg = f"The provided path isn't a file: {path}"
        raise DataFileError(msg, path=path)

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Unable to read data file {path}: {exc}"
        raise DataFileError(msg, path=path) from exc

    try:
        snapshot = StoreSnapshot.model_validate_json(raw)
    except ValidationError as exc:
        msg = f"Failed to parse {path} as a usage-tracker data file"
        raise DataFileError(msg, path=path) from exc

    logger.debug("Loaded %d tracked objects from %s", len(snapshot.objects), path)
    return Store.from_snapshot(snapshot)


def save_store(store: Store, path: Path, *, backup: bool = True) -> None:
    """Write *store* to *path*, rotating the previous file to a backup.

    Parent directories are created as needed.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    if backup and path.exists():
        bak = backup_path_for(path)
        path.replace(bak)
        logger.debug("Moved previous data file to %s", bak)

    rendered = store.to_snapshot().model_dump_json(indent=2)
    path.write_text(rendered + "\n", encoding="utf-8")
    logger.debug("Saved %d tracked objects to %s", len(store), path)
