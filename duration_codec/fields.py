"""Pydantic field types that store durations as compact strings.

Attach the codec to a model field with ``Annotated``:

    class RetryPolicy(BaseModel):
        backoff: DurationTicks             # int nanoseconds <-> "250ms"
        deadline: CompactTimedelta         # timedelta <-> "30s"

Both types read a bare int as a nanosecond tick count. Decode failures,
including values outside the tick range, surface as
pydantic.ValidationError like any other field error.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from duration_codec.adapters import (
    format_timedelta,
    parse_timedelta,
    ticks_from_timedelta,
    ticks_to_timedelta,
)
from duration_codec.codec import (
    DURATION_JSON_SCHEMA,
    DURATION_PATTERN,
    check_ticks,
    decode_duration,
    encode_duration,
)


def _validate_ticks(value: Any) -> int:
    if isinstance(value, str):
        return decode_duration(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return check_ticks(value)
    raise ValueError(f"Expected a duration string or tick count, got {type(value).__name__}")


def _validate_timedelta(value: Any) -> timedelta:
    if isinstance(value, str):
        return parse_timedelta(value)
    if isinstance(value, timedelta):
        ticks_from_timedelta(value)
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return ticks_to_timedelta(value)
    raise ValueError(
        f"Expected a duration string, timedelta or tick count, got {type(value).__name__}"
    )


DurationTicks = Annotated[
    int,
    PlainValidator(_validate_ticks),
    PlainSerializer(encode_duration, return_type=str),
    WithJsonSchema(DURATION_JSON_SCHEMA),
]

CompactTimedelta = Annotated[
    timedelta,
    PlainValidator(_validate_timedelta),
    PlainSerializer(format_timedelta, return_type=str),
    WithJsonSchema(DURATION_JSON_SCHEMA),
]


__all__ = [
    "DURATION_PATTERN",
    "DurationTicks",
    "CompactTimedelta",
]
