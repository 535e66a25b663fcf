"""Tests for the pydantic field types."""

import json
import re
from datetime import timedelta

import pytest
from pydantic import BaseModel, ValidationError

from duration_codec.codec import TICKS_MAX
from duration_codec.fields import DURATION_PATTERN, CompactTimedelta, DurationTicks


class RetryPolicy(BaseModel):
    backoff: DurationTicks
    deadline: CompactTimedelta = timedelta(seconds=30)


class TestDurationTicks:
    def test_decode_string(self):
        policy = RetryPolicy.model_validate({"backoff": "250ms"})
        assert policy.backoff == 250_000_000

    def test_accepts_tick_count(self):
        policy = RetryPolicy(backoff=1_500_000)
        assert policy.backoff == 1_500_000

    def test_encode(self):
        policy = RetryPolicy(backoff=123_000_000_000)
        assert policy.model_dump()["backoff"] == "123s"
        assert json.loads(policy.model_dump_json())["backoff"] == "123s"

    def test_json_round_trip(self):
        raw = '{"backoff":"-2h","deadline":"1500us"}'
        assert RetryPolicy.model_validate_json(raw).model_dump_json() == raw

    def test_encode_is_unit_minimal(self):
        policy = RetryPolicy.model_validate({"backoff": "3600s"})
        assert policy.model_dump()["backoff"] == "1h"

    @pytest.mark.parametrize(
        "value", ["", "abc", "123x", "12", "99999999999999999999s", TICKS_MAX + 1, True, 1.5]
    )
    def test_invalid_input_is_validation_error(self, value):
        with pytest.raises(ValidationError):
            RetryPolicy.model_validate({"backoff": value})

    def test_error_message_names_the_problem(self):
        with pytest.raises(ValidationError, match="Unit 'x' not supported"):
            RetryPolicy.model_validate({"backoff": "123x"})


class TestCompactTimedelta:
    def test_decode_string(self):
        policy = RetryPolicy.model_validate({"backoff": "1s", "deadline": "2m"})
        assert policy.deadline == timedelta(minutes=2)

    def test_accepts_timedelta(self):
        policy = RetryPolicy(backoff=0, deadline=timedelta(milliseconds=5))
        assert policy.model_dump()["deadline"] == "5ms"

    def test_default_encodes(self):
        assert RetryPolicy(backoff=0).model_dump() == {"backoff": "0s", "deadline": "30s"}

    def test_rejects_sub_microsecond(self):
        with pytest.raises(ValidationError):
            RetryPolicy.model_validate({"backoff": "1s", "deadline": "1500ns"})

    def test_out_of_range_timedelta_rejected_at_validation(self):
        with pytest.raises(ValidationError, match="outside the representable range"):
            RetryPolicy(backoff=0, deadline=timedelta(days=200_000))

    def test_largest_accepted_timedelta_encodes(self):
        policy = RetryPolicy(backoff=0, deadline=timedelta(days=106_751))
        assert policy.model_dump()["deadline"] == "106751d"

    def test_int_is_tick_count(self):
        policy = RetryPolicy(backoff=0, deadline=1_500_000)
        assert policy.deadline == timedelta(microseconds=1_500)
        assert policy.model_dump()["deadline"] == "1500us"

    @pytest.mark.parametrize("value", [5, True, 1.5, None])
    def test_rejects_other_inputs(self, value):
        with pytest.raises(ValidationError):
            RetryPolicy(backoff=0, deadline=value)


class TestJsonSchema:
    def test_schema_is_pattern_string(self):
        schema = RetryPolicy.model_json_schema()
        backoff = schema["properties"]["backoff"]
        assert backoff["type"] == "string"
        assert backoff["pattern"] == DURATION_PATTERN

    def test_timedelta_schema_is_pattern_string(self):
        deadline = RetryPolicy.model_json_schema()["properties"]["deadline"]
        assert deadline["type"] == "string"
        assert deadline["pattern"] == DURATION_PATTERN

    @pytest.mark.parametrize("text", ["123s", "-5ms", "0w"])
    def test_pattern_matches_grammar(self, text):
        assert re.match(DURATION_PATTERN, text)

    @pytest.mark.parametrize("text", ["1.5s", "1h2m", "s", "+1s"])
    def test_pattern_rejects_outside_grammar(self, text):
        assert not re.match(DURATION_PATTERN, text)
