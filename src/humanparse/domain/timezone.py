"""Whole-hour UTC offsets.

Only offsets of -12..+12 whole hours are accepted. RFC3339 allows minute
offsets such as ``+05:30``; those are rejected here and must be handled by a
richer offset parser that still produces a :class:`FixedOffset`.
"""

from __future__ import annotations

from dataclasses import dataclass

from humanparse.domain.errors import ErrorKind, ParseError

SECS_PER_HOUR = 3600
MAX_HOUR_OFFSET = 12


@dataclass(frozen=True, slots=True)
class FixedOffset:
    """A signed offset from UTC in whole seconds."""

    seconds: int

    @property
    def offset_seconds(self) -> int:
        return self.seconds

    @classmethod
    def utc(cls) -> FixedOffset:
        return _OFFSETS[MAX_HOUR_OFFSET]

    @classmethod
    def from_hour_offset(cls, hours: int) -> FixedOffset | None:
        """Return the canonical offset for *hours*, or None outside -12..+12."""
        if not -MAX_HOUR_OFFSET <= hours <= MAX_HOUR_OFFSET:
            return None
        return _OFFSETS[hours + MAX_HOUR_OFFSET]

    @classmethod
    def parse_zone_suffix(cls, suffix: str) -> FixedOffset:
        """Resolve a zone suffix such as ``Z``, ``-00:00`` or ``+08:00``.

        The empty string means UTC. Raises :class:`ParseError` with
        ``INVALID_VALUE`` for anything else outside the closed literal set.
        """
        offset = _ZONE_SUFFIXES.get(suffix)
        if offset is None:
            raise ParseError(ErrorKind.INVALID_VALUE)
        return offset

    def __str__(self) -> str:
        hours, rem = divmod(abs(self.seconds), SECS_PER_HOUR)
        sign = "-" if self.seconds < 0 else "+"
        return f"{sign}{hours:02d}:{rem // 60:02d}"


# Indexed by hour offset + 12.
_OFFSETS: tuple[FixedOffset, ...] = tuple(
    FixedOffset(h * SECS_PER_HOUR) for h in range(-MAX_HOUR_OFFSET, MAX_HOUR_OFFSET + 1)
)

_ZONE_SUFFIXES: dict[str, FixedOffset] = {
    "": _OFFSETS[MAX_HOUR_OFFSET],
    "Z": _OFFSETS[MAX_HOUR_OFFSET],
    "+00:00": _OFFSETS[MAX_HOUR_OFFSET],
    "-00:00": _OFFSETS[MAX_HOUR_OFFSET],
    **{f"-{h:02d}:00": _OFFSETS[MAX_HOUR_OFFSET - h] for h in range(1, MAX_HOUR_OFFSET + 1)},
    **{f"+{h:02d}:00": _OFFSETS[MAX_HOUR_OFFSET + h] for h in range(1, MAX_HOUR_OFFSET + 1)},
}
