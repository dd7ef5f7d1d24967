"""The result envelope every ParseService operation returns.

A rejected literal is data, not an exception: it comes back as
``ok=False`` with a :class:`ServiceError` whose ``code`` is the
:class:`~humanparse.domain.errors.ErrorKind` name.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from humanparse.domain.errors import ParseError


class ServiceError(BaseModel):
    """Why a literal was rejected.

    Attributes:
        code: Upper-case kind name, e.g. ``"INVALID_UNIT"``.
        message: Human-readable description including the input.
        detail: ``{"kind": ..., "input": ...}`` for parse failures.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_parse_error(cls, exc: ParseError, text: str) -> ServiceError:
        return cls(
            code=exc.kind.name,
            message=f"{exc.kind.description}: {text!r}",
            detail={"kind": exc.kind.value, "input": text},
        )


class ServiceResult(BaseModel):
    """Outcome of one parse operation.

    ``data["value"]`` holds the canonical scalar on success; ``meta`` is
    only set when telemetry is enabled.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, text: str, exc: ParseError) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError.from_parse_error(exc, text))

    @property
    def value(self) -> Any:
        """The parsed scalar, or None on failure or when there is none."""
        return self.data.get("value")
