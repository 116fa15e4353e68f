"""Consumption estimate from a usage history.

The rate is the number of intervals between recorded usages divided by
the time they span: the first usage opens the window and is not itself
counted as consumption within it. The prediction is rounded up, so a
supply estimate errs on the side of too much.

Arithmetic is done on integer microseconds to keep the ceiling exact.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timedelta

_MICROSECOND = timedelta(microseconds=1)
_MICROSECONDS_PER_SECOND = 1_000_000


def observed_span(usages: Sequence[datetime]) -> timedelta:
    """Time between the earliest and latest usage (zero for < 2 usages)."""
    if len(usages) < 2:
        return timedelta(0)
    return max(usages) - min(usages)


def estimate(usages: Sequence[datetime], requested_span: int) -> int | None:
    """Predict how many usages fall within *requested_span* seconds.

    Returns None when the history cannot yield a rate: fewer than two
    usages, or all usages at the same instant.

    Examples:
        >>> from datetime import UTC, datetime, timedelta
        >>> t0 = datetime(2024, 1, 1, tzinfo=UTC)
        >>> estimate([t0, t0 + timedelta(seconds=10)], 20)
        2
        >>> estimate([t0], 100) is None
        True
    """
    span_us = observed_span(usages) // _MICROSECOND
    if span_us <= 0:
        return None

    intervals = len(usages) - 1
    numerator = intervals * requested_span * _MICROSECONDS_PER_SECOND
    return -(-numerator // span_us)
