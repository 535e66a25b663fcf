"""Unit table -- the closed set of time units and their scales.

Scales are expressed in nanoseconds, the tick of the codec. The set is a
fixed constant: persisted duration strings depend on it.
"""

from __future__ import annotations

from enum import Enum
from functools import total_ordering
from typing import Iterator

from duration_codec.errors import UnknownUnitError

NANOS_PER_MICRO = 1_000
NANOS_PER_MILLI = 1_000_000
NANOS_PER_SECOND = 1_000_000_000

# Non-leap seconds
SECS_PER_MINUTE = 60
SECS_PER_HOUR = 3_600
SECS_PER_DAY = 86_400
SECS_PER_WEEK = 604_800


@total_ordering
class TimeUnit(Enum):
    """Supported time units, declared smallest to largest.

    The value of each member is its canonical suffix on the wire.

    Examples:
        >>> TimeUnit.SECOND.suffix
        's'
        >>> TimeUnit.MINUTE.scale
        60000000000
    """

    NANOSECOND = "ns"
    MICROSECOND = "us"
    MILLISECOND = "ms"
    SECOND = "s"
    MINUTE = "m"
    HOUR = "h"
    DAY = "d"
    WEEK = "w"

    @property
    def suffix(self) -> str:
        return self.value

    @property
    def scale(self) -> int:
        """Nanoseconds in one unit."""
        return _SCALES[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TimeUnit):
            return NotImplemented
        return self.scale < other.scale

    @classmethod
    def from_name(cls, name: str) -> TimeUnit:
        """Look up a unit by suffix or by its long name.

        Accepts the canonical suffix plus aliases such as "secs" or
        "milliseconds". Meant for human input; the wire grammar only
        accepts canonical suffixes (see unit_by_suffix).
        """
        unit = _ALIASES.get(name)
        if unit is None:
            raise UnknownUnitError(name)
        return unit


_SCALES: dict[TimeUnit, int] = {
    TimeUnit.NANOSECOND: 1,
    TimeUnit.MICROSECOND: NANOS_PER_MICRO,
    TimeUnit.MILLISECOND: NANOS_PER_MILLI,
    TimeUnit.SECOND: NANOS_PER_SECOND,
    TimeUnit.MINUTE: SECS_PER_MINUTE * NANOS_PER_SECOND,
    TimeUnit.HOUR: SECS_PER_HOUR * NANOS_PER_SECOND,
    TimeUnit.DAY: SECS_PER_DAY * NANOS_PER_SECOND,
    TimeUnit.WEEK: SECS_PER_WEEK * NANOS_PER_SECOND,
}

_BY_SUFFIX: dict[str, TimeUnit] = {unit.value: unit for unit in TimeUnit}

_ALIASES: dict[str, TimeUnit] = {
    **_BY_SUFFIX,
    "nanosecond": TimeUnit.NANOSECOND,
    "nanos": TimeUnit.NANOSECOND,
    "nanoseconds": TimeUnit.NANOSECOND,
    "microsecond": TimeUnit.MICROSECOND,
    "micros": TimeUnit.MICROSECOND,
    "microseconds": TimeUnit.MICROSECOND,
    "millisecond": TimeUnit.MILLISECOND,
    "millis": TimeUnit.MILLISECOND,
    "milliseconds": TimeUnit.MILLISECOND,
    "second": TimeUnit.SECOND,
    "secs": TimeUnit.SECOND,
    "seconds": TimeUnit.SECOND,
    "minute": TimeUnit.MINUTE,
    "mins": TimeUnit.MINUTE,
    "minutes": TimeUnit.MINUTE,
    "hour": TimeUnit.HOUR,
    "hours": TimeUnit.HOUR,
    "day": TimeUnit.DAY,
    "days": TimeUnit.DAY,
    "week": TimeUnit.WEEK,
    "weeks": TimeUnit.WEEK,
}

_LARGEST_FIRST: tuple[TimeUnit, ...] = tuple(
    sorted(TimeUnit, key=lambda unit: _SCALES[unit], reverse=True)
)


def scale_of(unit: TimeUnit) -> int:
    """Nanoseconds per one `unit`."""
    return _SCALES[unit]


def suffix_of(unit: TimeUnit) -> str:
    """Canonical wire suffix of `unit`."""
    return unit.value


def unit_by_suffix(suffix: str) -> TimeUnit:
    """Exact, case-sensitive lookup of a canonical suffix."""
    unit = _BY_SUFFIX.get(suffix)
    if unit is None:
        raise UnknownUnitError(suffix)
    return unit


def units_largest_first() -> Iterator[TimeUnit]:
    """Yield every unit from the largest scale down to nanoseconds."""
    yield from _LARGEST_FIRST


__all__ = [
    "NANOS_PER_MICRO",
    "NANOS_PER_MILLI",
    "NANOS_PER_SECOND",
    "TimeUnit",
    "scale_of",
    "suffix_of",
    "unit_by_suffix",
    "units_largest_first",
]
