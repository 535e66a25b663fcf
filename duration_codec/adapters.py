"""Conversions between tick counts and external duration representations.

Two forms are supported: a ``(seconds, nanos)`` pair with nanos in
``[0, 1e9)`` and ``datetime.timedelta``. Both convert losslessly or fail.
"""

from __future__ import annotations

from datetime import timedelta

from duration_codec.codec import check_ticks, format_duration, parse_duration
from duration_codec.errors import SubsecondPrecisionError
from duration_codec.units import NANOS_PER_MICRO, NANOS_PER_SECOND, SECS_PER_DAY


def ticks_from_parts(seconds: int, nanos: int = 0) -> int:
    """Combine whole seconds and a sub-second nanosecond count."""
    if not 0 <= nanos < NANOS_PER_SECOND:
        raise SubsecondPrecisionError(
            f"Sub-second component must be in [0, {NANOS_PER_SECOND}), got {nanos}"
        )
    return check_ticks(seconds * NANOS_PER_SECOND + nanos)


def ticks_to_parts(ticks: int) -> tuple[int, int]:
    """Split a tick count into (seconds, nanos); nanos is never negative."""
    return divmod(check_ticks(ticks), NANOS_PER_SECOND)


def ticks_from_timedelta(td: timedelta) -> int:
    # Integer arithmetic only; td.total_seconds() is a float
    micros = (td.days * SECS_PER_DAY + td.seconds) * 1_000_000 + td.microseconds
    return check_ticks(micros * NANOS_PER_MICRO)


def ticks_to_timedelta(ticks: int) -> timedelta:
    """Convert a tick count to a timedelta.

    Raises:
        SubsecondPrecisionError: `ticks` is not a whole number of
            microseconds, the resolution of timedelta.
    """
    micros, remainder = divmod(check_ticks(ticks), NANOS_PER_MICRO)
    if remainder:
        raise SubsecondPrecisionError(
            f"{format_duration(ticks)} cannot be represented as a timedelta "
            f"without losing {remainder}ns"
        )
    return timedelta(microseconds=micros)


def format_timedelta(td: timedelta) -> str:
    return format_duration(ticks_from_timedelta(td))


def parse_timedelta(text: str) -> timedelta:
    return ticks_to_timedelta(parse_duration(text))


__all__ = [
    "ticks_from_parts",
    "ticks_to_parts",
    "ticks_from_timedelta",
    "ticks_to_timedelta",
    "format_timedelta",
    "parse_timedelta",
]
