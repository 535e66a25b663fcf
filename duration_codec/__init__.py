"""Compact duration strings for serialized data.

Formats nanosecond tick counts as short strings such as "123s", "45ms" or
"2h", and parses them back exactly.
"""

from __future__ import annotations

__version__ = "0.1.0"

from duration_codec.adapters import (
    format_timedelta,
    parse_timedelta,
    ticks_from_parts,
    ticks_from_timedelta,
    ticks_to_parts,
    ticks_to_timedelta,
)
from duration_codec.codec import (
    TICKS_MAX,
    TICKS_MIN,
    decode_duration,
    encode_duration,
    format_duration,
    parse_duration,
    split_duration,
)
from duration_codec.duration_unit import DurationUnit
from duration_codec.errors import (
    DurationError,
    DurationOverflowError,
    DurationParseError,
    EmptyInputError,
    InvalidNumberError,
    SubsecondPrecisionError,
    UnknownUnitError,
)
from duration_codec.fields import CompactTimedelta, DurationTicks
from duration_codec.units import (
    TimeUnit,
    scale_of,
    suffix_of,
    unit_by_suffix,
    units_largest_first,
)

__all__ = [
    "__version__",
    "TICKS_MIN",
    "TICKS_MAX",
    "TimeUnit",
    "scale_of",
    "suffix_of",
    "unit_by_suffix",
    "units_largest_first",
    "format_duration",
    "parse_duration",
    "split_duration",
    "encode_duration",
    "decode_duration",
    "DurationUnit",
    "DurationTicks",
    "CompactTimedelta",
    "ticks_from_parts",
    "ticks_to_parts",
    "ticks_from_timedelta",
    "ticks_to_timedelta",
    "format_timedelta",
    "parse_timedelta",
    "DurationError",
    "DurationParseError",
    "EmptyInputError",
    "InvalidNumberError",
    "UnknownUnitError",
    "DurationOverflowError",
    "SubsecondPrecisionError",
]
