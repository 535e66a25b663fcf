"""Exception hierarchy for duration encoding and decoding.

Every error derives from DurationError, which is a ValueError so that
pydantic validators report it as a regular ValidationError.
"""

from __future__ import annotations


class DurationError(ValueError):
    """Base exception for all duration codec errors."""

    pass


class DurationParseError(DurationError):
    """A duration string could not be parsed."""

    def __init__(self, message: str, text: str = "") -> None:
        super().__init__(message)
        self.text = text


class EmptyInputError(DurationParseError):
    """The input string has zero length."""

    def __init__(self) -> None:
        super().__init__("Duration string is empty", "")


class InvalidNumberError(DurationParseError):
    """The leading segment is not a signed integer."""

    def __init__(self, text: str) -> None:
        super().__init__(
            f"Invalid duration: {text!r}. Expected a leading integer.", text
        )


class UnknownUnitError(DurationParseError):
    """The trailing segment is not a canonical unit suffix."""

    def __init__(self, suffix: str, text: str = "") -> None:
        if suffix:
            message = f"Unit {suffix!r} not supported"
        else:
            message = "No unit provided"
        if text:
            message = f"{message} in {text!r}"
        super().__init__(message, text)
        self.suffix = suffix


class DurationOverflowError(DurationError):
    """Magnitude times scale falls outside the tick range."""

    def __init__(self, message: str, text: str = "") -> None:
        super().__init__(message)
        self.text = text


class SubsecondPrecisionError(DurationError):
    """A sub-second component cannot be represented exactly."""

    pass


__all__ = [
    "DurationError",
    "DurationParseError",
    "EmptyInputError",
    "InvalidNumberError",
    "UnknownUnitError",
    "DurationOverflowError",
    "SubsecondPrecisionError",
]
