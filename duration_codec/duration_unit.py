"""DurationUnit -- a duration kept in the unit it was written in.

Unlike a raw tick count, a DurationUnit remembers its unit: "60s" and "1m"
describe the same span but are different values. Its textual form uses the
same grammar as the codec, and pydantic models (de)serialize it as that
string.
"""

from __future__ import annotations

from datetime import timedelta
from functools import total_ordering
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictInt, model_serializer, model_validator

from duration_codec.adapters import ticks_to_timedelta
from duration_codec.codec import (
    DURATION_JSON_SCHEMA,
    check_ticks,
    parse_duration_unit,
    split_duration,
)
from duration_codec.units import NANOS_PER_SECOND, TimeUnit


def _text_json_schema(schema: dict[str, Any], model: type) -> None:
    # Matches serialize_text, not the field layout
    schema.clear()
    schema.update(DURATION_JSON_SCHEMA)


@total_ordering
class DurationUnit(BaseModel):
    """A (magnitude, unit) pair such as 10 seconds or 500 milliseconds.

    Usage:
        timeout = DurationUnit.parse("500ms")
        timeout.to_ticks()          # 500_000_000
        str(DurationUnit.from_secs(10))  # "10s"

        class Settings(BaseModel):
            poll_interval: DurationUnit

        Settings.model_validate_json('{"poll_interval": "5m"}')
    """

    model_config = ConfigDict(frozen=True, json_schema_extra=_text_json_schema)

    magnitude: StrictInt
    unit: TimeUnit

    @model_validator(mode="before")
    @classmethod
    def validate_text(cls, data: Any) -> Any:
        if isinstance(data, str):
            magnitude, unit = parse_duration_unit(data)
            return {"magnitude": magnitude, "unit": unit}
        return data

    @model_validator(mode="after")
    def validate_range(self) -> DurationUnit:
        check_ticks(self.magnitude * self.unit.scale, str(self))
        return self

    @model_serializer
    def serialize_text(self) -> str:
        return str(self)

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> DurationUnit:
        """Parse a compact duration string, keeping its unit.

        Raises the codec's classified errors rather than a ValidationError.
        """
        magnitude, unit = parse_duration_unit(text)
        return cls(magnitude=magnitude, unit=unit)

    @classmethod
    def from_ticks(cls, ticks: int) -> DurationUnit:
        """Unit-minimal DurationUnit for a tick count."""
        magnitude, unit = split_duration(ticks)
        return cls(magnitude=magnitude, unit=unit)

    @classmethod
    def from_nanos(cls, value: int) -> DurationUnit:
        return cls(magnitude=value, unit=TimeUnit.NANOSECOND)

    @classmethod
    def from_micros(cls, value: int) -> DurationUnit:
        return cls(magnitude=value, unit=TimeUnit.MICROSECOND)

    @classmethod
    def from_millis(cls, value: int) -> DurationUnit:
        return cls(magnitude=value, unit=TimeUnit.MILLISECOND)

    @classmethod
    def from_secs(cls, value: int) -> DurationUnit:
        return cls(magnitude=value, unit=TimeUnit.SECOND)

    @classmethod
    def from_mins(cls, value: int) -> DurationUnit:
        return cls(magnitude=value, unit=TimeUnit.MINUTE)

    @classmethod
    def from_hours(cls, value: int) -> DurationUnit:
        return cls(magnitude=value, unit=TimeUnit.HOUR)

    @classmethod
    def from_days(cls, value: int) -> DurationUnit:
        return cls(magnitude=value, unit=TimeUnit.DAY)

    @classmethod
    def from_weeks(cls, value: int) -> DurationUnit:
        return cls(magnitude=value, unit=TimeUnit.WEEK)

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def to_ticks(self) -> int:
        return self.magnitude * self.unit.scale

    def as_secs(self) -> int:
        """Whole seconds, truncated toward zero."""
        seconds = abs(self.to_ticks()) // NANOS_PER_SECOND
        return -seconds if self.magnitude < 0 else seconds

    def to_timedelta(self) -> timedelta:
        return ticks_to_timedelta(self.to_ticks())

    def normalized(self) -> DurationUnit:
        """The unit-minimal equivalent, e.g. 60s -> 1m."""
        return DurationUnit.from_ticks(self.to_ticks())

    def __str__(self) -> str:
        return f"{self.magnitude}{self.unit.suffix}"

    def __repr__(self) -> str:
        return f"DurationUnit({str(self)!r})"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DurationUnit):
            return NotImplemented
        return (self.to_ticks(), self.unit) < (other.to_ticks(), other.unit)


__all__ = ["DurationUnit"]
