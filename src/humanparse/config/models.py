"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, humanparse.toml only contains
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from humanparse.domain.checked import IntType
from humanparse.domain.fields import Timestamp

# --- humanparse.toml sections ---


class ByteSizeConfig(BaseModel):
    """[byte_size] section."""

    model_config = {"frozen": True}

    int_type: IntType = IntType.USIZE


class DurationConfig(BaseModel):
    """[duration] section."""

    model_config = {"frozen": True}

    strict: bool = False


class TimestampConfig(BaseModel):
    """[timestamp] section.

    ``since`` is the reference instant that parsed timestamps are measured
    from. When unset, the Unix epoch is used.
    """

    model_config = {"frozen": True}

    since: Timestamp | None = None


class HumanParseConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    byte_size: ByteSizeConfig = Field(default_factory=ByteSizeConfig)
    duration: DurationConfig = Field(default_factory=DurationConfig)
    timestamp: TimestampConfig = Field(default_factory=TimestampConfig)
