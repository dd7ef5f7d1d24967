"""Fixed-width integer types and checked arithmetic.

Python integers never overflow, so every parser that promises a bounded
result declares the width it targets and routes arithmetic through these
helpers. A result outside the width is reported as ``None``, never wrapped.

INVARIANT: ``isize``/``usize`` are 64 bits wide.
"""

from __future__ import annotations

from enum import StrEnum


class IntType(StrEnum):
    """Integer widths a parsed value can be checked against."""

    I8 = "i8"
    U8 = "u8"
    I16 = "i16"
    U16 = "u16"
    I32 = "i32"
    U32 = "u32"
    I64 = "i64"
    U64 = "u64"
    ISIZE = "isize"
    USIZE = "usize"

    @property
    def bits(self) -> int:
        return _BITS[self]

    @property
    def signed(self) -> bool:
        return self.value.startswith("i")

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, n: int) -> bool:
        """Whether *n* is representable in this width."""
        return self.min_value <= n <= self.max_value


_BITS: dict[IntType, int] = {
    IntType.I8: 8,
    IntType.U8: 8,
    IntType.I16: 16,
    IntType.U16: 16,
    IntType.I32: 32,
    IntType.U32: 32,
    IntType.I64: 64,
    IntType.U64: 64,
    IntType.ISIZE: 64,
    IntType.USIZE: 64,
}


def checked_cast(n: int, int_type: IntType) -> int | None:
    """Return *n* unchanged if it fits *int_type*, else None."""
    return n if int_type.contains(n) else None


def checked_add(a: int, b: int, int_type: IntType) -> int | None:
    """Add two numbers, returning None instead of overflowing *int_type*."""
    return checked_cast(a + b, int_type)


def checked_mul(a: int, b: int, int_type: IntType) -> int | None:
    """Multiply two numbers, returning None instead of overflowing *int_type*."""
    return checked_cast(a * b, int_type)
