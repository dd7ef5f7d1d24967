"""ParseService — byte sizes, durations, and RFC3339 timestamps.

Each operation parses one literal and returns a ServiceResult whose
``data["value"]`` holds the canonical scalar (bytes, nanoseconds, or
``"<unix seconds>.<nanos>"``). Parse failures become ``ok=False`` results
with the error kind as the code; anything else propagates.
"""

from __future__ import annotations

import logging
from typing import Any

from humanparse.domain.bytes import parse_bytes
from humanparse.domain.checked import IntType
from humanparse.domain.duration import Duration, parse_duration
from humanparse.domain.errors import ParseError
from humanparse.domain.instant import UNIX_EPOCH, Instant
from humanparse.domain.rfc3339 import parse_rfc3339
from humanparse.services.base import BaseService
from humanparse.services.result import ServiceResult
from humanparse.services.telemetry import get_current_span, trace_span, traced

logger = logging.getLogger(__name__)


def _duration_data(duration: Duration) -> dict[str, Any]:
    return {
        "seconds": duration.seconds,
        "nanos": duration.nanos,
        "total_nanos": duration.total_nanos,
    }


class ParseService(BaseService):
    """Parse human-written literals using the configured defaults."""

    @traced
    def parse_bytes(self, text: str, *, int_type: IntType | None = None) -> ServiceResult:
        """Parse a byte-size literal such as ``"512 MiB"``.

        *int_type* overrides ``[byte_size] int_type`` from settings.
        """
        op = "parse_bytes"
        width = int_type or self._settings.byte_size.int_type
        span = get_current_span()
        if span is not None:
            span.annotate("int_type", width.value)
        try:
            result = parse_bytes(text, width)
        except ParseError as exc:
            return self._failure(op, text, exc)

        logger.debug("parsed %r as %d bytes (%s)", text, result.size, width.value)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "input": text,
                "value": result.size,
                "int_type": width.value,
            },
        )

    @traced
    def parse_duration(self, text: str, *, strict: bool | None = None) -> ServiceResult:
        """Parse a duration literal such as ``"1h 30m"``.

        *strict* overrides ``[duration] strict`` from settings.
        """
        op = "parse_duration"
        if strict is None:
            strict = self._settings.duration.strict
        try:
            duration = parse_duration(text, strict=strict)
        except ParseError as exc:
            return self._failure(op, text, exc)

        logger.debug("parsed %r as %s", text, duration)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "input": text,
                "value": duration.total_nanos,
                **_duration_data(duration),
            },
        )

    @traced
    def parse_time(self, text: str, *, since: str | None = None) -> ServiceResult:
        """Parse an RFC3339 timestamp.

        The result carries the Unix offset (None before 1970) and the
        elapsed time since a reference instant: *since* when given,
        otherwise ``[timestamp] since`` from settings, otherwise the Unix
        epoch. A reference later than the timestamp is reported as a
        warning, not an error.
        """
        op = "parse_time"
        with trace_span("rfc3339"):
            try:
                instant = parse_rfc3339(text)
            except ParseError as exc:
                return self._failure(op, text, exc)

        reference: Instant | None = self._settings.timestamp.since
        if since is not None:
            try:
                reference = parse_rfc3339(since)
            except ParseError as exc:
                return self._failure(op, since, exc)
        if reference is None:
            reference = UNIX_EPOCH

        warnings: list[str] = []
        unix = instant.to_unix_instant()
        elapsed = instant.since(reference)
        if elapsed is None:
            warnings.append("Timestamp precedes the reference instant; elapsed is unavailable")

        data: dict[str, Any] = {
            "input": text,
            "value": f"{unix.seconds}.{unix.nanos:09d}" if unix is not None else None,
            "seconds": instant.seconds,
            "nanos": instant.nanos,
            "unix": _duration_data(unix) if unix is not None else None,
            "elapsed": _duration_data(elapsed) if elapsed is not None else None,
        }
        logger.debug("parsed %r as instant %d.%09d", text, instant.seconds, instant.nanos)
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
