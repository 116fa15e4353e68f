"""Duration requests for the ``need`` command.

Units form a closed set with fixed lengths: a month is always 30 days
and a year always 365 days.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel

from usage_tracker.domain.errors import InvalidDuration


class DurationUnit(StrEnum):
    """Calendar units accepted in a duration request."""

    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


SECONDS_PER_UNIT: dict[DurationUnit, int] = {
    DurationUnit.SECOND: 1,
    DurationUnit.MINUTE: 60,
    DurationUnit.HOUR: 3600,
    DurationUnit.DAY: 86400,
    DurationUnit.WEEK: 604800,
    DurationUnit.MONTH: 30 * 86400,
    DurationUnit.YEAR: 365 * 86400,
}

# Lower-cased spellings accepted on the command line.
_UNIT_ALIASES: dict[str, DurationUnit] = {
    "s": DurationUnit.SECOND,
    "sec": DurationUnit.SECOND,
    "second": DurationUnit.SECOND,
    "seconds": DurationUnit.SECOND,
    "m": DurationUnit.MINUTE,
    "min": DurationUnit.MINUTE,
    "minute": DurationUnit.MINUTE,
    "minutes": DurationUnit.MINUTE,
    "h": DurationUnit.HOUR,
    "hour": DurationUnit.HOUR,
    "hours": DurationUnit.HOUR,
    "d": DurationUnit.DAY,
    "day": DurationUnit.DAY,
    "days": DurationUnit.DAY,
    "w": DurationUnit.WEEK,
    "week": DurationUnit.WEEK,
    "weeks": DurationUnit.WEEK,
    "mo": DurationUnit.MONTH,
    "month": DurationUnit.MONTH,
    "months": DurationUnit.MONTH,
    "y": DurationUnit.YEAR,
    "year": DurationUnit.YEAR,
    "years": DurationUnit.YEAR,
}


class Duration(BaseModel):
    """An integer magnitude of a :class:`DurationUnit`."""

    model_config = {"frozen": True}

    magnitude: int
    unit: DurationUnit

    @property
    def seconds(self) -> int:
        """Total length in seconds."""
        return self.magnitude * SECONDS_PER_UNIT[self.unit]


def parse_unit(unit: str) -> DurationUnit | None:
    """Resolve a unit spelling, or None if it is not recognized.

    Examples:
        >>> parse_unit("y")
        <DurationUnit.YEAR: 'year'>
        >>> parse_unit("Weeks")
        <DurationUnit.WEEK: 'week'>
        >>> parse_unit("fortnight") is None
        True
    """
    return _UNIT_ALIASES.get(unit.strip().lower())


def parse_duration(magnitude: str | int, unit: str) -> Duration:
    """Build a :class:`Duration` from raw command-line input.

    Raises:
        InvalidDuration: *magnitude* is not an integer or *unit* is unknown.
    """
    raw = str(magnitude)
    try:
        value = int(raw.strip())
    except ValueError:
        msg = f"Duration magnitude must be an integer, got {raw!r}"
        raise InvalidDuration(msg, magnitude=raw, unit=unit) from None

    parsed_unit = parse_unit(unit)
    if parsed_unit is None:
        accepted = ", ".join(u.value for u in DurationUnit)
        msg = f"Unknown duration unit {unit!r} (expected one of: {accepted})"
        raise InvalidDuration(msg, magnitude=raw, unit=unit)

    return Duration(magnitude=value, unit=parsed_unit)
