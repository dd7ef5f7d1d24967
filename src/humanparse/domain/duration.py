"""Elapsed-time durations and the duration literal parser.

A literal is one or more ``<int><unit>`` segments, optionally separated by
whitespace: ``"1h30m"``, ``"1d 12h 120s"``. Units are ``ns us ms s m h d``.
The bare literal ``"0"`` is accepted as a zero duration.

Segments are summed in nanoseconds as an unsigned 64-bit value; anything
that would exceed it is an ``OVERFLOW``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from humanparse.domain.checked import IntType, checked_add, checked_mul
from humanparse.domain.errors import ErrorKind, ParseError

NANOS_PER_SEC = 1_000_000_000
NANOS_PER_MICRO = 1_000

UNIT_NANOS: dict[str, int] = {
    "ns": 1,
    "us": 1_000,
    "ms": 1_000_000,
    "s": NANOS_PER_SEC,
    "m": 60 * NANOS_PER_SEC,
    "h": 3600 * NANOS_PER_SEC,
    "d": 24 * 3600 * NANOS_PER_SEC,
}

_DIGITS = b"0123456789"


@dataclass(frozen=True, order=True, slots=True)
class Duration:
    """A non-negative span of time with nanosecond precision.

    INVARIANT: ``0 <= nanos < 1_000_000_000``.
    """

    seconds: int
    nanos: int = 0

    def __post_init__(self) -> None:
        if self.seconds < 0 or not 0 <= self.nanos < NANOS_PER_SEC:
            msg = f"invalid duration components: seconds={self.seconds}, nanos={self.nanos}"
            raise ValueError(msg)

    @classmethod
    def from_nanos(cls, nanos: int) -> Duration:
        seconds, rem = divmod(nanos, NANOS_PER_SEC)
        return cls(seconds, rem)

    @property
    def total_nanos(self) -> int:
        return self.seconds * NANOS_PER_SEC + self.nanos

    def to_timedelta(self) -> timedelta:
        """Convert to :class:`datetime.timedelta`, truncating below a microsecond."""
        return timedelta(seconds=self.seconds, microseconds=self.nanos // NANOS_PER_MICRO)

    def __str__(self) -> str:
        if not self.nanos:
            return f"{self.seconds}s"
        return f"{self.seconds}.{self.nanos:09d}".rstrip("0") + "s"


def parse_duration(text: str, *, strict: bool = False) -> Duration:
    """Parse a duration literal such as ``"1h 30m"``.

    Args:
        text: The literal. Surrounding whitespace is ignored.
        strict: Reject literals that repeat a unit (``"1h 1h"``) with
            ``DUPLICATE_UNIT`` instead of summing them.

    Raises:
        ParseError: ``EMPTY_INPUT``, ``MISSING_VALUE``, ``MISSING_UNIT``,
            ``INVALID_UNIT``, ``DUPLICATE_UNIT`` or ``OVERFLOW``.
    """
    literal = text.strip()
    if not literal:
        raise ParseError(ErrorKind.EMPTY_INPUT)
    if literal == "0":
        return Duration(0, 0)

    data = literal.encode("utf-8")
    total = 0
    seen: set[str] = set()
    pos = 0
    while pos < len(data):
        value, pos = _read_int(data, pos)
        unit, pos = _read_unit(data, pos)
        nanos = UNIT_NANOS.get(unit)
        if nanos is None:
            raise ParseError(ErrorKind.INVALID_UNIT)
        if strict:
            if unit in seen:
                raise ParseError(ErrorKind.DUPLICATE_UNIT)
            seen.add(unit)
        contribution = checked_mul(value, nanos, IntType.U64)
        if contribution is None:
            raise ParseError(ErrorKind.OVERFLOW)
        summed = checked_add(total, contribution, IntType.U64)
        if summed is None:
            raise ParseError(ErrorKind.OVERFLOW)
        total = summed

    return Duration.from_nanos(total)


def _read_int(data: bytes, pos: int) -> tuple[int, int]:
    """Consume ASCII digits from *pos*; return ``(value, new_pos)``."""
    start = pos
    value = 0
    while pos < len(data) and data[pos] in _DIGITS:
        stepped = checked_add(value * 10, data[pos] - 0x30, IntType.U64)
        if stepped is None:
            raise ParseError(ErrorKind.OVERFLOW)
        value = stepped
        pos += 1
    if pos == start:
        raise ParseError(ErrorKind.MISSING_VALUE)
    return value, pos


def _read_unit(data: bytes, pos: int) -> tuple[str, int]:
    """Consume every non-digit byte from *pos*; return ``(unit, new_pos)``."""
    start = pos
    while pos < len(data) and data[pos] not in _DIGITS:
        pos += 1
    if pos == start:
        raise ParseError(ErrorKind.MISSING_UNIT)
    # Slices end on ASCII digits, so they are always valid UTF-8.
    return data[start:pos].decode("utf-8").strip(), pos
