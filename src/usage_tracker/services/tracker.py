"""TrackerService — one operation per user command.

Mutating operations set ``changed=True`` on success so the caller knows
to persist the store. Read-only operations never do.
"""

from __future__ import annotations

import logging

from usage_tracker.domain.durations import parse_duration
from usage_tracker.domain.errors import TrackerError
from usage_tracker.domain.estimate import estimate
from usage_tracker.services.base import BaseService
from usage_tracker.services.result import ServiceResult

logger = logging.getLogger(__name__)


class TrackerService(BaseService):
    """Adds, removes, records, lists, and estimates tracked things."""

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, name: str) -> ServiceResult:
        """Start tracking a new thing."""
        op = "add"
        try:
            self._store.add(name)
        except TrackerError as exc:
            return self._failure(op, exc)
        logger.debug("Added %r", name)
        return ServiceResult(
            ok=True, op=op, data={"name": name, "usage_count": 0}, changed=True
        )

    def remove(self, name: str) -> ServiceResult:
        """Stop tracking a thing and drop its history."""
        op = "remove"
        try:
            count = len(self._store.get_usages(name))
            self._store.remove(name)
        except TrackerError as exc:
            return self._failure(op, exc)
        logger.debug("Removed %r with %d usages", name, count)
        return ServiceResult(
            ok=True, op=op, data={"name": name, "usage_count": count}, changed=True
        )

    def clear(self) -> ServiceResult:
        """Remove every tracked thing."""
        removed = self._store.clear()
        logger.debug("Cleared %d tracked objects", removed)
        return ServiceResult(ok=True, op="clear", data={"removed": removed}, changed=True)

    def use(self, name: str) -> ServiceResult:
        """Record one usage of *name* at the current time."""
        op = "use"
        try:
            used_at = self._store.record_usage(name)
            count = len(self._store.get_usages(name))
        except TrackerError as exc:
            return self._failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"name": name, "used_at": used_at.isoformat(), "usage_count": count},
            changed=True,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_things(self, *, include_usages: bool = False) -> ServiceResult:
        """List tracked names, optionally with their usage histories."""
        items: list[dict[str, object]] = []
        for name in self._store.names():
            usages = self._store.get_usages(name)
            item: dict[str, object] = {"name": name, "usage_count": len(usages)}
            if include_usages:
                item["usages"] = [ts.isoformat() for ts in usages]
            items.append(item)
        return ServiceResult(ok=True, op="list", data={"items": items, "count": len(items)})

    def show(self, name: str) -> ServiceResult:
        """Return the recorded usages of *name* in order."""
        op = "show"
        try:
            usages = self._store.get_usages(name)
        except TrackerError as exc:
            return self._failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "name": name,
                "usages": [ts.isoformat() for ts in usages],
                "count": len(usages),
            },
        )

    def need(self, name: str, magnitude: str | int, unit: str) -> ServiceResult:
        """Estimate how many units of *name* are used over a duration."""
        op = "need"
        try:
            duration = parse_duration(magnitude, unit)
            usages = self._store.get_usages(name)
        except TrackerError as exc:
            return self._failure(op, exc)

        predicted = estimate(usages, duration.seconds)
        warnings: list[str] = []
        if predicted is None:
            warnings.append(f"Not enough usages of {name!r} recorded to estimate a rate")
        logger.debug(
            "Estimated %r over %d s from %d usages: %s",
            name,
            duration.seconds,
            len(usages),
            predicted,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "name": name,
                "magnitude": duration.magnitude,
                "unit": duration.unit.value,
                "requested_seconds": duration.seconds,
                "predicted": predicted,
                "sufficient_data": predicted is not None,
            },
            warnings=warnings,
        )
