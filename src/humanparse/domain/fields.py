"""Pydantic field types for human-written config values.

Declare fields with these annotations and pydantic will accept literals::

    class Limits(BaseModel):
        max_upload: ByteSize
        timeout: HumanDuration
        not_before: Timestamp | None = None

A :class:`ParseError` is a ``ValueError``, so pydantic reports it as a
regular validation error.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator

from humanparse.domain.bytes import Bytes, parse_bytes
from humanparse.domain.checked import IntType
from humanparse.domain.duration import Duration, parse_duration
from humanparse.domain.instant import Instant
from humanparse.domain.rfc3339 import parse_rfc3339


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _to_bytes(value: Any) -> Bytes:
    if isinstance(value, Bytes):
        return value
    if isinstance(value, str):
        return parse_bytes(value)
    if _is_int(value):
        if not IntType.USIZE.contains(value):
            msg = f"byte size out of range: {value}"
            raise ValueError(msg)
        return Bytes(value)
    msg = f"expected a byte-size literal or integer, got {type(value).__name__}"
    raise ValueError(msg)


def _to_duration(value: Any) -> Duration:
    if isinstance(value, Duration):
        return value
    if isinstance(value, str):
        return parse_duration(value)
    if _is_int(value):
        if value < 0:
            msg = f"duration must not be negative: {value}"
            raise ValueError(msg)
        return Duration.from_nanos(value)
    msg = f"expected a duration literal or integer, got {type(value).__name__}"
    raise ValueError(msg)


def _to_instant(value: Any) -> Instant:
    if isinstance(value, Instant):
        return value
    if isinstance(value, str):
        return parse_rfc3339(value)
    msg = f"expected an RFC3339 timestamp, got {type(value).__name__}"
    raise ValueError(msg)


ByteSize = Annotated[
    Bytes,
    PlainValidator(_to_bytes),
    PlainSerializer(lambda b: b.size, return_type=int),
]
"""Byte count from ``"1 GiB"``-style literals or a plain integer of bytes."""

HumanDuration = Annotated[
    Duration,
    PlainValidator(_to_duration),
    PlainSerializer(lambda d: d.total_nanos, return_type=int),
]
"""Duration from ``"1h30m"``-style literals or a plain integer of nanoseconds."""

Timestamp = Annotated[
    Instant,
    PlainValidator(_to_instant),
    PlainSerializer(lambda i: {"seconds": i.seconds, "nanos": i.nanos}, return_type=dict),
]
"""Instant from an RFC3339 literal."""
