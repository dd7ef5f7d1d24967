"""Tests for the parse error taxonomy."""

from __future__ import annotations

import pytest

from humanparse.domain.errors import ErrorKind, ParseError


class TestErrorKind:
    def test_every_kind_has_description(self) -> None:
        for kind in ErrorKind:
            assert kind.description

    @pytest.mark.parametrize(
        ("kind", "description"),
        [
            (ErrorKind.EMPTY_INPUT, "empty input"),
            (ErrorKind.TOO_SHORT, "input too short"),
            (ErrorKind.MALFORMED, "malformed input"),
            (ErrorKind.INVALID_TIMEZONE, "invalid timezone"),
            (ErrorKind.OVERFLOW, "value overflow"),
        ],
    )
    def test_description(self, kind: ErrorKind, description: str) -> None:
        assert kind.description == description

    def test_values_are_snake_case(self) -> None:
        assert ErrorKind.MISSING_UNIT == "missing_unit"
        assert ErrorKind("duplicate_unit") is ErrorKind.DUPLICATE_UNIT


class TestParseError:
    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="missing unit"):
            raise ParseError(ErrorKind.MISSING_UNIT)

    def test_carries_kind(self) -> None:
        err = ParseError(ErrorKind.OVERFLOW)
        assert err.kind is ErrorKind.OVERFLOW
        assert str(err) == "value overflow"

    def test_equality_by_kind(self) -> None:
        assert ParseError(ErrorKind.TOO_LONG) == ParseError(ErrorKind.TOO_LONG)
        assert ParseError(ErrorKind.TOO_LONG) != ParseError(ErrorKind.TOO_SHORT)
        assert len({ParseError(ErrorKind.TOO_LONG), ParseError(ErrorKind.TOO_LONG)}) == 1

    def test_repr(self) -> None:
        assert repr(ParseError(ErrorKind.INVALID_UNIT)) == "ParseError(INVALID_UNIT)"
