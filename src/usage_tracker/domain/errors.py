"""Error taxonomy raised by the domain layer.

Every error carries a stable ``code`` that the service layer copies into
:class:`~usage_tracker.services.result.ServiceError`.
"""

from __future__ import annotations

from typing import Any


class TrackerError(Exception):
    """Base class for all recoverable domain errors."""

    code = "TRACKER_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class DuplicateName(TrackerError):
    """A tracked object with this name already exists."""

    code = "DUPLICATE_NAME"

    def __init__(self, name: str) -> None:
        super().__init__(f"A thing named {name!r} already exists", name=name)
        self.name = name


class NotFound(TrackerError):
    """No tracked object with this name exists."""

    code = "NOT_FOUND"

    def __init__(self, name: str) -> None:
        super().__init__(f"No thing named {name!r} exists", name=name)
        self.name = name


class InvalidName(TrackerError):
    """A name is empty or only whitespace."""

    code = "INVALID_NAME"

    def __init__(self, name: str) -> None:
        super().__init__("Name must not be empty", name=name)
        self.name = name


class InvalidDuration(TrackerError):
    """A duration request has a non-integer magnitude or an unknown unit."""

    code = "INVALID_DURATION"

    def __init__(self, message: str, *, magnitude: str, unit: str) -> None:
        super().__init__(message, magnitude=magnitude, unit=unit)
