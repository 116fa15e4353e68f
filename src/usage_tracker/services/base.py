"""BaseService — foundation for usage-tracker services.

Every service receives the :class:`Store` it operates on at construction
time. Loading and saving that store is the caller's job.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from usage_tracker.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from usage_tracker.domain.errors import TrackerError
    from usage_tracker.domain.store import Store


class BaseService:
    """Base for service-layer classes.

    Usage::

        class TrackerService(BaseService):
            def add(self, name: str) -> ServiceResult:
                try:
                    self._store.add(name)
                except TrackerError as exc:
                    return self._failure("add", exc)
                ...
    """

    def __init__(self, store: Store) -> None:
        self._store = store

    @staticmethod
    def _failure(op: str, exc: TrackerError) -> ServiceResult:
        """Convert a domain error into a failed ServiceResult."""
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=exc.code, message=exc.message, detail=exc.detail),
        )
