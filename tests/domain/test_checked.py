"""Tests for fixed-width integer checks."""

from __future__ import annotations

import pytest

from humanparse.domain.checked import IntType, checked_add, checked_cast, checked_mul


class TestIntType:
    @pytest.mark.parametrize(
        ("int_type", "lo", "hi"),
        [
            (IntType.I8, -128, 127),
            (IntType.U8, 0, 255),
            (IntType.I16, -32768, 32767),
            (IntType.U16, 0, 65535),
            (IntType.I32, -(2**31), 2**31 - 1),
            (IntType.U32, 0, 2**32 - 1),
            (IntType.I64, -(2**63), 2**63 - 1),
            (IntType.U64, 0, 2**64 - 1),
            (IntType.ISIZE, -(2**63), 2**63 - 1),
            (IntType.USIZE, 0, 2**64 - 1),
        ],
    )
    def test_bounds(self, int_type: IntType, lo: int, hi: int) -> None:
        assert int_type.min_value == lo
        assert int_type.max_value == hi
        assert int_type.contains(lo)
        assert int_type.contains(hi)
        assert not int_type.contains(lo - 1)
        assert not int_type.contains(hi + 1)

    def test_signedness(self) -> None:
        assert IntType.I32.signed
        assert IntType.ISIZE.signed
        assert not IntType.U8.signed
        assert not IntType.USIZE.signed

    def test_lookup_by_value(self) -> None:
        assert IntType("u16") is IntType.U16


class TestCheckedOps:
    def test_cast(self) -> None:
        assert checked_cast(255, IntType.U8) == 255
        assert checked_cast(256, IntType.U8) is None
        assert checked_cast(-1, IntType.U64) is None

    def test_add(self) -> None:
        assert checked_add(2**63 - 1, 0, IntType.I64) == 2**63 - 1
        assert checked_add(2**63 - 1, 1, IntType.I64) is None
        assert checked_add(2**63 - 1, 1, IntType.U64) == 2**63

    def test_mul(self) -> None:
        assert checked_mul(100, 1000**6, IntType.U64) is None
        assert checked_mul(18, 1000**6, IntType.U64) == 18 * 1000**6
        assert checked_mul(-2, 64, IntType.I8) == -128
        assert checked_mul(2, 64, IntType.I8) is None
