"""RFC3339 timestamp parsing.

Accepted shapes (after trimming surrounding whitespace)::

    YYYY-MM-DD
    YYYY-MM-DD{T| }HH:MM:SS
    YYYY-MM-DD{T| }HH:MM:SS[.F{1,9}][Z|±HH:00]

The input is checked in a fixed order with no backtracking: length,
punctuation, fixed-width digits, fraction, zone, then calendar validation.
Each stage fails with its own :class:`ErrorKind`, so a misplaced separator
is always ``MALFORMED`` and never a numeric error.

Offsets are whole hours only (see :mod:`humanparse.domain.timezone`).
"""

from __future__ import annotations

from humanparse.domain.errors import ErrorKind, ParseError
from humanparse.domain.instant import Instant
from humanparse.domain.timezone import FixedOffset

DATE_LEN = 10
DATETIME_LEN = 19
MAX_LEN = 35
MAX_FRACTION_DIGITS = 9

_DATE_SEP = ord("-")
_TIME_SEP = ord(":")
_DATETIME_SEPS = b"T "
_SUFFIX_STARTS = b".Z+-"
_FRACTION_MARK = ord(".")


def parse_rfc3339(text: str) -> Instant:
    """Parse an RFC3339 timestamp into an :class:`Instant`.

    Missing time fields default to midnight and a missing zone means UTC.

    Raises:
        ParseError: ``EMPTY_INPUT``, ``TOO_SHORT``, ``TOO_LONG``,
            ``MALFORMED``, ``INVALID_VALUE``, ``MISSING_VALUE``,
            ``INVALID_TIMEZONE``, or ``OVERFLOW`` when the fields do not
            name a real instant in [0000, 10000).
    """
    literal = text.strip()
    if not literal:
        raise ParseError(ErrorKind.EMPTY_INPUT)

    data = literal.encode("utf-8")
    size = len(data)
    if size < DATE_LEN or DATE_LEN < size < DATETIME_LEN:
        raise ParseError(ErrorKind.TOO_SHORT)
    if size > MAX_LEN:
        raise ParseError(ErrorKind.TOO_LONG)

    _check_punctuation(data)

    year = _fixed_int(data, 0, 4)
    month = _fixed_int(data, 5, 2)
    day = _fixed_int(data, 8, 2)
    hour = minute = second = 0
    if size > DATE_LEN:
        hour = _fixed_int(data, 11, 2)
        minute = _fixed_int(data, 14, 2)
        second = _fixed_int(data, 17, 2)

    nanosecond = 0
    zone_start = min(size, DATETIME_LEN)
    if size > DATETIME_LEN and data[DATETIME_LEN] == _FRACTION_MARK:
        nanosecond, zone_start = _fraction(data, DATETIME_LEN + 1)

    offset = _zone(data[zone_start:])

    instant = Instant.from_civil(year, month, day, hour, minute, second, nanosecond, offset)
    if instant is None:
        raise ParseError(ErrorKind.OVERFLOW)
    return instant


def _check_punctuation(data: bytes) -> None:
    size = len(data)
    ok = data[4] == _DATE_SEP and data[7] == _DATE_SEP
    if ok and size > DATE_LEN:
        ok = data[10] in _DATETIME_SEPS and data[13] == _TIME_SEP and data[16] == _TIME_SEP
    if ok and size > DATETIME_LEN:
        ok = data[DATETIME_LEN] in _SUFFIX_STARTS
    if not ok:
        raise ParseError(ErrorKind.MALFORMED)


def _is_digit(byte: int) -> bool:
    return 0x30 <= byte <= 0x39


def _fixed_int(data: bytes, start: int, width: int) -> int:
    """Decode exactly *width* ASCII digits at *start*."""
    value = 0
    for byte in data[start : start + width]:
        if not _is_digit(byte):
            raise ParseError(ErrorKind.INVALID_VALUE)
        value = value * 10 + byte - 0x30
    return value


def _fraction(data: bytes, start: int) -> tuple[int, int]:
    """Read up to nine fractional digits as nanoseconds.

    Returns ``(nanoseconds, next_position)``. Digits are a fixed-point
    fraction, so ``5`` is 500_000_000. A tenth digit is not consumed.
    """
    pos = start
    value = 0
    end = min(len(data), start + MAX_FRACTION_DIGITS)
    while pos < end and _is_digit(data[pos]):
        value = value * 10 + data[pos] - 0x30
        pos += 1
    digits = pos - start
    if digits == 0:
        raise ParseError(ErrorKind.MISSING_VALUE)
    return value * 10 ** (MAX_FRACTION_DIGITS - digits), pos


def _zone(suffix: bytes) -> FixedOffset:
    try:
        return FixedOffset.parse_zone_suffix(suffix.decode("ascii"))
    except (UnicodeDecodeError, ParseError) as exc:
        raise ParseError(ErrorKind.INVALID_TIMEZONE) from exc
