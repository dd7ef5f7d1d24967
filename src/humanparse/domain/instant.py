"""Absolute instants on a proleptic-Gregorian axis.

An :class:`Instant` counts seconds from 0000-01-01T00:00:00Z plus a
nanosecond remainder. The axis covers [year 0000, year 10000).

Civil tuples are converted with exact integer arithmetic: whole years are
decomposed into 400-, 100-, 4- and 1-year blocks whose day counts are fixed
constants, so results are bit-identical across every cycle.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from humanparse.domain.duration import NANOS_PER_MICRO, NANOS_PER_SEC, Duration
from humanparse.domain.timezone import FixedOffset

SECS_PER_MINUTE = 60
SECS_PER_HOUR = 60 * SECS_PER_MINUTE
SECS_PER_DAY = 24 * SECS_PER_HOUR

DAYS_PER_400_YEARS = 365 * 400 + 97
DAYS_PER_100_YEARS = 365 * 100 + 24
DAYS_PER_4_YEARS = 365 * 4 + 1

# Days elapsed before the first of each month in a common year.
DAYS_BEFORE_MONTH: tuple[int, ...] = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)

MAX_YEAR = 10000
UNIX_EPOCH_SECONDS = 62167132800

_UNIX_EPOCH_DATETIME = datetime(1970, 1, 1, tzinfo=UTC)


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def day_number(year: int, month: int, day: int) -> int:
    """Day index of a valid calendar date on the instant axis.

    Whole years are counted in 400/100/4/1-year blocks. Each block is
    credited its leap day up front, so a leap year's own January and
    February give one day back. Year 0000's correction makes its January
    1st day ``-1``; every later date is offset by the same single day, so
    differences between dates are exact.
    """
    days = 0
    y = year
    n, y = divmod(y, 400)
    days += n * DAYS_PER_400_YEARS
    n, y = divmod(y, 100)
    days += n * DAYS_PER_100_YEARS
    n, y = divmod(y, 4)
    days += n * DAYS_PER_4_YEARS
    days += y * 365

    days += DAYS_BEFORE_MONTH[month - 1]
    if is_leap_year(year) and month <= 2:
        days -= 1
    return days + day - 1


# 10000-01-01T00:00:00Z counted in whole days from 0000-01-01, so it sits one
# day past day_number(MAX_YEAR, 1, 1) on this axis.
MAX_SECONDS = 315569520000


@dataclass(frozen=True, order=True, slots=True)
class Instant:
    """A point in time, ordered by ``(seconds, nanos)``.

    Use :meth:`from_civil` or :func:`humanparse.domain.rfc3339.parse_rfc3339`
    to build one; both validate the range.
    """

    seconds: int
    nanos: int = 0

    @classmethod
    def from_civil(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
        offset: FixedOffset | None = None,
    ) -> Instant | None:
        """Build an instant from a civil tuple read at *offset* (default UTC).

        Returns None when any field is out of range, the day does not exist
        in that month, the value is a leap second, or the shifted instant
        falls outside [0, MAX_SECONDS). Only years 0000..9999 are accepted,
        but a western offset may carry a late 9999-12-31 into the last day
        of the axis.
        """
        if not (
            0 <= year < MAX_YEAR
            and 1 <= month <= 12
            and 1 <= day <= 31
            and 0 <= hour <= 23
            and 0 <= minute <= 59
            and 0 <= second <= 59
            and 0 <= nanosecond < NANOS_PER_SEC
        ):
            return None

        if day > days_in_month(year, month):
            return None

        seconds = (
            day_number(year, month, day) * SECS_PER_DAY
            + hour * SECS_PER_HOUR
            + minute * SECS_PER_MINUTE
            + second
        )

        shift = (offset or FixedOffset.utc()).offset_seconds
        if shift >= 0:
            if shift > seconds:
                return None
            seconds -= shift
        else:
            seconds += -shift

        if not 0 <= seconds < MAX_SECONDS:
            return None
        return cls(seconds, nanosecond)

    @classmethod
    def parse(cls, text: str) -> Instant:
        """Parse an RFC3339 timestamp. See :func:`parse_rfc3339`."""
        from humanparse.domain.rfc3339 import parse_rfc3339

        return parse_rfc3339(text)

    def since(self, earlier: Instant) -> Duration | None:
        """Time elapsed from *earlier* to this instant, or None if it is later."""
        if self < earlier:
            return None
        seconds = self.seconds - earlier.seconds
        nanos = self.nanos
        if nanos < earlier.nanos:
            seconds -= 1
            nanos += NANOS_PER_SEC
        return Duration(seconds, nanos - earlier.nanos)

    def to_unix_instant(self) -> Duration | None:
        """Duration since 1970-01-01T00:00:00Z, or None before the Unix epoch."""
        return self.since(UNIX_EPOCH)

    def to_datetime(self) -> datetime | None:
        """UTC-aware :class:`datetime`, truncated to microseconds.

        None before the Unix epoch.
        """
        elapsed = self.to_unix_instant()
        if elapsed is None:
            return None
        return _UNIX_EPOCH_DATETIME + timedelta(
            seconds=elapsed.seconds, microseconds=elapsed.nanos // NANOS_PER_MICRO
        )


UNIX_EPOCH = Instant(UNIX_EPOCH_SECONDS, 0)
