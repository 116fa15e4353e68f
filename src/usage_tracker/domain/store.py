"""Store — the in-memory collection of tracked objects.

INVARIANT: every key of the mapping equals its object's ``name``, so a
name exists at most once. Usage histories only ever grow by appending
the current time; nothing here reorders or drops prior entries.

:class:`StoreSnapshot` is the serializable shape of a Store. The
persistence layer round-trips it through JSON; the Store itself never
touches the filesystem.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import UTC, datetime

from pydantic import AwareDatetime, BaseModel, Field, field_validator, model_validator

from usage_tracker.domain.errors import DuplicateName, InvalidName, NotFound

SNAPSHOT_VERSION = 1

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


class TrackedObject(BaseModel):
    """A named thing and the ordered timestamps at which it was used."""

    name: str
    usages: list[AwareDatetime] = Field(default_factory=list)

    @field_validator("usages")
    @classmethod
    def _normalize_to_utc(cls, value: list[datetime]) -> list[datetime]:
        return [ts.astimezone(UTC) for ts in value]


class StoreSnapshot(BaseModel):
    """Serializable form of a :class:`Store`."""

    version: int = SNAPSHOT_VERSION
    objects: dict[str, TrackedObject] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _keys_match_names(self) -> StoreSnapshot:
        for key, obj in self.objects.items():
            if key != obj.name:
                msg = f"Key {key!r} does not match object name {obj.name!r}"
                raise ValueError(msg)
        return self


class Store:
    """Named tracked objects and their usage histories.

    Usage::

        store = Store()
        store.add("milk")
        store.record_usage("milk")
        store.get_usages("milk")  # (datetime(...),)

    Args:
        clock: Source of "now" for :meth:`record_usage`. Defaults to the
            system clock in UTC.
    """

    def __init__(self, *, clock: Clock = utc_now) -> None:
        self._objects: dict[str, TrackedObject] = {}
        self._clock = clock

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, name: str) -> None:
        """Start tracking *name* with an empty usage history."""
        if not name.strip():
            raise InvalidName(name)
        if name in self._objects:
            raise DuplicateName(name)
        self._objects[name] = TrackedObject(name=name)

    def remove(self, name: str) -> None:
        """Stop tracking *name*, discarding its whole history."""
        if name not in self._objects:
            raise NotFound(name)
        del self._objects[name]

    def clear(self) -> int:
        """Remove every tracked object. Returns how many were removed."""
        count = len(self._objects)
        self._objects.clear()
        return count

    def record_usage(self, name: str) -> datetime:
        """Append the current time to *name*'s history and return it."""
        obj = self._objects.get(name)
        if obj is None:
            raise NotFound(name)
        now = self._clock().astimezone(UTC)
        obj.usages.append(now)
        return now

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def names(self) -> Iterator[str]:
        """Iterate over tracked names in sorted order."""
        return iter(sorted(self._objects))

    def get_usages(self, name: str) -> tuple[datetime, ...]:
        """Return an immutable copy of *name*'s usage history."""
        obj = self._objects.get(name)
        if obj is None:
            raise NotFound(name)
        return tuple(obj.usages)

    def __contains__(self, name: object) -> bool:
        return name in self._objects

    def __len__(self) -> int:
        return len(self._objects)

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def to_snapshot(self) -> StoreSnapshot:
        """Deep-copy the current state into a :class:`StoreSnapshot`."""
        return StoreSnapshot(
            objects={name: obj.model_copy(deep=True) for name, obj in self._objects.items()}
        )

    @classmethod
    def from_snapshot(cls, snapshot: StoreSnapshot, *, clock: Clock = utc_now) -> Store:
        """Build a Store holding a deep copy of *snapshot*'s objects."""
        store = cls(clock=clock)
        for name, obj in snapshot.objects.items():
            store._objects[name] = obj.model_copy(deep=True)
        return store
