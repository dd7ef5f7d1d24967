"""Byte-size literals such as ``"1 GiB"``, ``"512k"`` or ``"10MB"``.

Binary units (``KiB`` .. ``EiB``) are powers of 1024; decimal units
(``KB`` .. ``EB``) are powers of 1000. Unit tokens are case-insensitive and
the trailing ``b`` is optional, so ``ki``, ``KiB`` and ``kib`` are the same.
A missing unit means bytes.

Results are checked against an :class:`IntType` (``usize`` by default):
``"100 EB"`` does not fit in 64 bits and is an ``OVERFLOW``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from humanparse.domain.checked import IntType, checked_cast, checked_mul
from humanparse.domain.errors import ErrorKind, ParseError

_INT_LITERAL = re.compile(r"[+-]?[0-9]+")


class Unit(StrEnum):
    """Byte-size units, by their canonical symbol."""

    BYTE = "B"
    KIBIBYTE = "KiB"
    MEBIBYTE = "MiB"
    GIBIBYTE = "GiB"
    TEBIBYTE = "TiB"
    PEBIBYTE = "PiB"
    EXBIBYTE = "EiB"
    KILOBYTE = "KB"
    MEGABYTE = "MB"
    GIGABYTE = "GB"
    TERABYTE = "TB"
    PETABYTE = "PB"
    EXABYTE = "EB"

    @property
    def size(self) -> int:
        """Number of bytes in one unit."""
        return _UNIT_SIZES[self]

    @classmethod
    def from_token(cls, token: str) -> Unit:
        """Resolve a unit token (``""``, ``"b"``, ``"ki"``, ``"KiB"``, ...).

        Raises:
            ParseError: ``INVALID_UNIT`` for unknown tokens.
        """
        unit = _UNIT_TOKENS.get(token.strip().lower())
        if unit is None:
            raise ParseError(ErrorKind.INVALID_UNIT)
        return unit


_UNIT_SIZES: dict[Unit, int] = {
    Unit.BYTE: 1,
    Unit.KIBIBYTE: 1024,
    Unit.MEBIBYTE: 1024**2,
    Unit.GIBIBYTE: 1024**3,
    Unit.TEBIBYTE: 1024**4,
    Unit.PEBIBYTE: 1024**5,
    Unit.EXBIBYTE: 1024**6,
    Unit.KILOBYTE: 1000,
    Unit.MEGABYTE: 1000**2,
    Unit.GIGABYTE: 1000**3,
    Unit.TERABYTE: 1000**4,
    Unit.PETABYTE: 1000**5,
    Unit.EXABYTE: 1000**6,
}

# Lowercased tokens: "ki"/"kib", "k"/"kb", ...
_UNIT_TOKENS: dict[str, Unit] = {
    "": Unit.BYTE,
    "b": Unit.BYTE,
    **{
        token: unit
        for unit in Unit
        if unit is not Unit.BYTE
        for token in (unit.value[:-1].lower(), unit.value.lower())
    },
}


@dataclass(frozen=True, order=True, slots=True)
class Bytes:
    """A byte count checked against an integer width."""

    size: int
    int_type: IntType = IntType.USIZE

    @classmethod
    def of(cls, value: int, unit: Unit, int_type: IntType = IntType.USIZE) -> Bytes:
        """``value`` units, as bytes.

        Raises:
            ParseError: ``OVERFLOW`` if the value, the unit size, or the
                product does not fit *int_type*.
        """
        if checked_cast(value, int_type) is None or checked_cast(unit.size, int_type) is None:
            raise ParseError(ErrorKind.OVERFLOW)
        size = checked_mul(value, unit.size, int_type)
        if size is None:
            raise ParseError(ErrorKind.OVERFLOW)
        return cls(size, int_type)

    def __int__(self) -> int:
        return self.size

    def __str__(self) -> str:
        return f"{self.size}B"


def parse_bytes(text: str, int_type: IntType = IntType.USIZE) -> Bytes:
    """Parse a byte-size literal such as ``"1 KiB"``.

    The unit starts at the first letter or whitespace character; the part
    before it must be an integer literal.

    Raises:
        ParseError: ``EMPTY_INPUT``, ``MISSING_VALUE``, ``INVALID_UNIT``,
            ``INVALID_VALUE`` or ``OVERFLOW``.
    """
    literal = text.strip()
    if not literal:
        raise ParseError(ErrorKind.EMPTY_INPUT)

    split = next(
        (i for i, ch in enumerate(literal) if ch.isalpha() or ch.isspace()),
        len(literal),
    )
    if split == 0:
        raise ParseError(ErrorKind.MISSING_VALUE)

    number, token = literal[:split], literal[split:]
    unit = Unit.from_token(token)

    if not _INT_LITERAL.fullmatch(number):
        raise ParseError(ErrorKind.INVALID_VALUE)
    value = int(number)
    if value < 0 and not int_type.signed:
        raise ParseError(ErrorKind.INVALID_VALUE)

    return Bytes.of(value, unit, int_type)
