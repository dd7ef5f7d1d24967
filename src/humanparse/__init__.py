"""humanparse: exact typed values from human-written literals."""

from __future__ import annotations

from humanparse.domain.bytes import Bytes, Unit, parse_bytes
from humanparse.domain.checked import IntType
from humanparse.domain.duration import Duration, parse_duration
from humanparse.domain.errors import ErrorKind, ParseError
from humanparse.domain.instant import UNIX_EPOCH, Instant
from humanparse.domain.rfc3339 import parse_rfc3339
from humanparse.domain.timezone import FixedOffset

__version__ = "0.3.0"

__all__ = [
    "UNIX_EPOCH",
    "Bytes",
    "Duration",
    "ErrorKind",
    "FixedOffset",
    "Instant",
    "IntType",
    "ParseError",
    "Unit",
    "__version__",
    "parse_bytes",
    "parse_duration",
    "parse_rfc3339",
]
