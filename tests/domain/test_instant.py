"""Tests for the proleptic-Gregorian instant axis."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from humanparse.domain.duration import Duration
from humanparse.domain.instant import (
    MAX_SECONDS,
    UNIX_EPOCH,
    Instant,
    day_number,
    days_in_month,
    is_leap_year,
)
from humanparse.domain.timezone import FixedOffset

DAY = 86400
CST = FixedOffset.from_hour_offset(8)
PLUS_ONE = FixedOffset.from_hour_offset(1)
MINUS_ONE = FixedOffset.from_hour_offset(-1)


class TestCalendar:
    @pytest.mark.parametrize(
        ("year", "leap"),
        [(1600, True), (1700, False), (1900, False), (2000, True), (2004, True), (2100, False),
         (2023, False), (0, True)],
    )
    def test_is_leap_year(self, year: int, leap: bool) -> None:
        assert is_leap_year(year) is leap

    def test_days_in_month(self) -> None:
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(2023, 4) == 30
        assert days_in_month(2023, 12) == 31

    def test_day_number_is_consecutive(self) -> None:
        assert day_number(2000, 3, 1) - day_number(2000, 2, 28) == 2
        assert day_number(2100, 3, 1) - day_number(2100, 2, 28) == 1
        assert day_number(2001, 1, 1) - day_number(2000, 12, 31) == 1


class TestFromCivil:
    def test_unix_epoch(self) -> None:
        assert Instant.from_civil(1970, 1, 1) == UNIX_EPOCH

    @pytest.mark.parametrize(
        ("civil", "expected"),
        [
            ((2018, 1, 1), Duration(1514736000)),
            ((2018, 2, 1), Duration(1517414400)),
            ((2018, 3, 1), Duration(1519833600)),
            ((2018, 4, 1), Duration(1522512000)),
            ((2018, 5, 1), Duration(1525104000)),
            ((2018, 6, 1), Duration(1527782400)),
            ((2018, 7, 1), Duration(1530374400)),
            ((2018, 8, 1), Duration(1533052800)),
            ((2018, 9, 1), Duration(1535731200)),
            ((2018, 10, 1), Duration(1538323200)),
            ((2018, 11, 1), Duration(1541001600)),
            ((2018, 12, 1), Duration(1543593600)),
            ((2018, 9, 21, 16, 56, 44, 234867232), Duration(1537520204, 234867232)),
            ((2000, 2, 1), Duration(949334400)),
            ((2000, 3, 1), Duration(951840000)),
            ((2100, 2, 1), Duration(4105094400)),
            ((2100, 3, 1), Duration(4107513600)),
            ((2104, 2, 1), Duration(4231238400)),
            ((2104, 3, 1), Duration(4233744000)),
            ((2105, 2, 1), Duration(4262860800)),
            ((2105, 3, 1), Duration(4265280000)),
        ],
    )
    def test_plus_eight_hours(self, civil: tuple[int, ...], expected: Duration) -> None:
        instant = Instant.from_civil(*civil, offset=CST)
        assert instant is not None
        assert instant.since(UNIX_EPOCH) == expected

    def test_1970_to_9999(self) -> None:
        sec = 0
        for year in range(1970, 10000):
            if year > 1970:
                sec += 365 * DAY
                if is_leap_year(year - 1):
                    sec += DAY

            jan = Instant.from_civil(year, 1, 1, offset=FixedOffset.utc())
            assert jan is not None, f"{year}-01-01"
            assert jan.to_unix_instant() == Duration(sec), f"{year}-01-01"

            feb = Instant.from_civil(year, 2, 1)
            assert feb is not None, f"{year}-02-01"
            assert feb.to_unix_instant() == Duration(sec + 31 * DAY), f"{year}-02-01"

            march_days = 31 + (29 if is_leap_year(year) else 28)
            mar = Instant.from_civil(year, 3, 1)
            assert mar is not None, f"{year}-03-01"
            assert mar.to_unix_instant() == Duration(sec + march_days * DAY), f"{year}-03-01"

    @pytest.mark.parametrize(
        "civil",
        [
            (10000, 1, 1, 0, 0, 0, 0),
            (1988, 0, 1, 0, 0, 0, 0),
            (1988, 13, 1, 0, 0, 0, 0),
            (1988, 1, 0, 0, 0, 0, 0),
            (1988, 1, 32, 0, 0, 0, 0),
            (1987, 2, 29, 0, 0, 0, 0),
            (1988, 2, 30, 0, 0, 0, 0),
            (1988, 3, 32, 0, 0, 0, 0),
            (1988, 4, 31, 0, 0, 0, 0),
            (1988, 5, 32, 0, 0, 0, 0),
            (1988, 6, 31, 0, 0, 0, 0),
            (1988, 7, 32, 0, 0, 0, 0),
            (1988, 8, 32, 0, 0, 0, 0),
            (1988, 9, 31, 0, 0, 0, 0),
            (1988, 10, 32, 0, 0, 0, 0),
            (1988, 11, 31, 0, 0, 0, 0),
            (1988, 12, 32, 0, 0, 0, 0),
            (1988, 1, 1, 24, 0, 0, 0),
            (1988, 1, 1, 23, 60, 0, 0),
            (1988, 1, 1, 23, 59, 60, 0),
            (1988, 1, 1, 23, 59, 59, 1_000_000_000),
            (-1, 1, 1, 0, 0, 0, 0),
        ],
    )
    def test_invalid_tuple(self, civil: tuple[int, ...]) -> None:
        assert Instant.from_civil(*civil) is None

    def test_leap_day(self) -> None:
        assert Instant.from_civil(1988, 2, 29) is not None
        assert Instant.from_civil(2000, 2, 29) is not None
        assert Instant.from_civil(2100, 2, 29) is None


class TestRangeEdges:
    def test_max_seconds(self) -> None:
        assert MAX_SECONDS == 315569520000
        assert MAX_SECONDS == day_number(10000, 1, 1) * DAY + DAY

    def test_last_instant_utc(self) -> None:
        last = Instant.from_civil(9999, 12, 31, 23, 59, 59, 999_999_999)
        assert last == Instant(MAX_SECONDS - DAY - 1, 999_999_999)

    def test_year_10000_rejected(self) -> None:
        assert Instant.from_civil(10000, 1, 1) is None
        assert Instant.from_civil(10000, 1, 1, 0, 0, 0, 0, PLUS_ONE) is None

    def test_west_offset_shifts_within_range(self) -> None:
        instant = Instant.from_civil(9999, 12, 31, 23, 59, 59, 999_999_999, MINUS_ONE)
        assert instant == Instant(MAX_SECONDS - DAY - 1 + 3600, 999_999_999)
        assert Instant.from_civil(9999, 12, 31, 23, 0, 0, 0, MINUS_ONE) is not None

    def test_west_offset_stays_below_max(self) -> None:
        minus_twelve = FixedOffset.from_hour_offset(-12)
        instant = Instant.from_civil(9999, 12, 31, 23, 59, 59, 999_999_999, minus_twelve)
        assert instant is not None
        assert instant.seconds < MAX_SECONDS

    def test_east_offset_pulls_back_inside(self) -> None:
        instant = Instant.from_civil(9999, 12, 31, 23, 59, 59, 999_999_999, PLUS_ONE)
        assert instant == Instant(MAX_SECONDS - DAY - 1 - 3600, 999_999_999)

    def test_east_offset_before_axis(self) -> None:
        assert Instant.from_civil(0, 1, 1, 0, 0, 0, 0, PLUS_ONE) is None

    def test_axis_starts_one_day_into_year_zero(self) -> None:
        assert Instant.from_civil(0, 1, 1) is None
        assert Instant.from_civil(0, 1, 2) == Instant(0, 0)
        assert Instant.from_civil(0, 1, 2, 1, 0, 0, 0, PLUS_ONE) == Instant(0, 0)


class TestSince:
    def test_equal(self) -> None:
        assert Instant(10, 5).since(Instant(10, 5)) == Duration(0, 0)

    def test_nanosecond_borrow(self) -> None:
        assert Instant(10, 100).since(Instant(5, 200)) == Duration(4, 999_999_900)

    def test_later_reference(self) -> None:
        assert Instant(5, 0).since(Instant(5, 1)) is None
        assert Instant(5, 0).since(Instant(6, 0)) is None

    def test_ordering(self) -> None:
        a = Instant.from_civil(2018, 1, 1)
        b = Instant.from_civil(2018, 1, 1, 0, 0, 0, 1)
        assert a is not None and b is not None
        assert a < b
        assert sorted([b, a]) == [a, b]


class TestUnixConversions:
    def test_before_epoch(self) -> None:
        instant = Instant.from_civil(1969, 12, 31, 23, 59, 59, 999_999_999)
        assert instant is not None
        assert instant.to_unix_instant() is None
        assert instant.to_datetime() is None

    def test_epoch(self) -> None:
        assert UNIX_EPOCH.to_unix_instant() == Duration(0, 0)
        assert UNIX_EPOCH.to_datetime() == datetime(1970, 1, 1, tzinfo=UTC)

    @pytest.mark.parametrize(
        "civil",
        [(2000, 2, 29, 12, 30, 15), (2018, 9, 21, 8, 56, 44), (9999, 12, 31, 23, 59, 59)],
    )
    def test_to_datetime_matches_stdlib(self, civil: tuple[int, ...]) -> None:
        instant = Instant.from_civil(*civil)
        assert instant is not None
        assert instant.to_datetime() == datetime(*civil, tzinfo=UTC)

    def test_to_datetime_truncates_nanos(self) -> None:
        instant = Instant.from_civil(2018, 9, 21, 16, 56, 44, 234867232, CST)
        assert instant is not None
        assert instant.to_datetime() == datetime(2018, 9, 21, 8, 56, 44, 234867, tzinfo=UTC)


class TestParseAlias:
    def test_parse(self) -> None:
        assert Instant.parse("1970-01-01T00:00:00Z") == UNIX_EPOCH
