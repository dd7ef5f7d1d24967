"""Parse error taxonomy shared by the bytes, duration, and RFC3339 parsers.

The kinds form a closed set and carry no payload. Callers that need the
offending text keep the original input themselves.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Why a literal was rejected."""

    EMPTY_INPUT = "empty_input"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    MALFORMED = "malformed"
    MISSING_VALUE = "missing_value"
    INVALID_VALUE = "invalid_value"
    MISSING_UNIT = "missing_unit"
    INVALID_UNIT = "invalid_unit"
    DUPLICATE_UNIT = "duplicate_unit"
    INVALID_TIMEZONE = "invalid_timezone"
    OVERFLOW = "overflow"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[ErrorKind, str] = {
    ErrorKind.EMPTY_INPUT: "empty input",
    ErrorKind.TOO_SHORT: "input too short",
    ErrorKind.TOO_LONG: "input too long",
    ErrorKind.MALFORMED: "malformed input",
    ErrorKind.MISSING_VALUE: "missing value",
    ErrorKind.INVALID_VALUE: "invalid value",
    ErrorKind.MISSING_UNIT: "missing unit",
    ErrorKind.INVALID_UNIT: "invalid unit",
    ErrorKind.DUPLICATE_UNIT: "duplicate unit",
    ErrorKind.INVALID_TIMEZONE: "invalid timezone",
    ErrorKind.OVERFLOW: "value overflow",
}


class ParseError(ValueError):
    """A literal could not be converted. Only the :class:`ErrorKind` is kept."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.description)
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash(self.kind)

    def __repr__(self) -> str:
        return f"ParseError({self.kind.name})"
