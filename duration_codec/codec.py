"""Compact duration strings -- format a tick count and parse it back.

A tick is one nanosecond. The textual form is ``-?<digits><suffix>``
with one of the canonical suffixes from the unit table, e.g. ``"123s"``,
``"1500us"`` or ``"-2h"``. Formatting always picks the coarsest unit that
represents the value exactly, so ``parse_duration(format_duration(t)) == t``
for every tick count in range.
"""

from __future__ import annotations

import logging
import re

from duration_codec.errors import (
    DurationOverflowError,
    EmptyInputError,
    InvalidNumberError,
    UnknownUnitError,
)
from duration_codec.units import TimeUnit, unit_by_suffix, units_largest_first

logger = logging.getLogger(__name__)

# Signed 64-bit range
TICKS_MIN = -(2**63)
TICKS_MAX = 2**63 - 1

_NUMBER_RE = re.compile(r"-?[0-9]+")
_MAX_DIGITS = len(str(TICKS_MAX))

DURATION_PATTERN = "^-?[0-9]+(" + "|".join(unit.suffix for unit in TimeUnit) + ")$"

# JSON schema of every field serialized with this grammar
DURATION_JSON_SCHEMA = {"type": "string", "pattern": DURATION_PATTERN}


def check_ticks(ticks: int, text: str = "") -> int:
    """Return `ticks` unchanged, or raise if it is outside the tick range."""
    if not TICKS_MIN <= ticks <= TICKS_MAX:
        source = repr(text) if text else str(ticks)
        raise DurationOverflowError(
            f"Duration {source} is outside the representable range "
            f"[{TICKS_MIN}, {TICKS_MAX}] nanoseconds",
            text,
        )
    return ticks


def _require_ticks(ticks: object) -> int:
    # bool is an int subclass but never a duration
    if isinstance(ticks, bool) or not isinstance(ticks, int):
        raise TypeError(f"Expected an integer tick count, got {type(ticks).__name__}")
    return check_ticks(ticks)


def split_duration(ticks: int) -> tuple[int, TimeUnit]:
    """Decompose `ticks` into its unit-minimal (magnitude, unit) pair."""
    ticks = _require_ticks(ticks)
    if ticks == 0:
        return 0, TimeUnit.SECOND

    for unit in units_largest_first():
        if ticks % unit.scale == 0:
            return ticks // unit.scale, unit

    # Unreachable: nanoseconds have scale 1
    return ticks, TimeUnit.NANOSECOND


def format_duration(ticks: int) -> str:
    """Format a tick count with the largest evenly dividing unit.

    Examples:
        >>> format_duration(123_000_000_000)
        '123s'
        >>> format_duration(1_500_000)
        '1500us'
        >>> format_duration(0)
        '0s'
    """
    magnitude, unit = split_duration(ticks)
    return f"{magnitude}{unit.suffix}"


def parse_duration_unit(text: str) -> tuple[int, TimeUnit]:
    """Split `text` into a (magnitude, unit) pair without scaling it.

    The range is still checked, so any pair returned here converts to a
    valid tick count.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected a duration string, got {type(text).__name__}")
    if not text:
        raise EmptyInputError()

    match = _NUMBER_RE.match(text)
    if match is None:
        raise InvalidNumberError(text)

    suffix = text[match.end():]
    try:
        unit = unit_by_suffix(suffix)
    except UnknownUnitError:
        raise UnknownUnitError(suffix, text) from None

    number = match.group(0)
    if len(number.lstrip("-").lstrip("0")) > _MAX_DIGITS:
        # Also keeps int() clear of the interpreter's digit limit
        check_ticks(TICKS_MAX + 1, text)
    magnitude = int(number)
    check_ticks(magnitude * unit.scale, text)
    return magnitude, unit


def parse_duration(text: str) -> int:
    """Parse a compact duration string into a tick count.

    Any ``<integer><suffix>`` is accepted, including forms that are not
    unit-minimal such as ``"60s"``.

    Raises:
        EmptyInputError: `text` is empty.
        InvalidNumberError: `text` does not start with a signed integer.
        UnknownUnitError: the suffix is missing or not a canonical suffix.
        DurationOverflowError: the value does not fit the tick range.
    """
    magnitude, unit = parse_duration_unit(text)
    return magnitude * unit.scale


def encode_duration(ticks: int) -> str:
    """Serialization hook: tick count to string."""
    return format_duration(ticks)


def decode_duration(text: str) -> int:
    """Deserialization hook: string to tick count."""
    try:
        return parse_duration(text)
    except ValueError as e:
        logger.debug("Rejected duration %r: %s", text, e)
        raise


__all__ = [
    "TICKS_MIN",
    "TICKS_MAX",
    "DURATION_PATTERN",
    "DURATION_JSON_SCHEMA",
    "check_ticks",
    "split_duration",
    "format_duration",
    "parse_duration_unit",
    "parse_duration",
    "encode_duration",
    "decode_duration",
]
