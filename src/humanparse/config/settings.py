"""HumanParseSettings — one frozen object for flags, env vars and TOML.

Highest priority first:

1. keyword arguments (the CLI flags)
2. ``HUMANPARSE_*`` env vars, with ``__`` for nesting
   (``HUMANPARSE_DURATION__STRICT=true``)
3. the ``humanparse.toml`` picked by :func:`~humanparse.config.discovery.resolve_config`
4. the defaults in :mod:`humanparse.config.models`
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from humanparse.config.discovery import ConfigFileError, read_toml, resolve_config
from humanparse.config.models import ByteSizeConfig, DurationConfig, TimestampConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Feeds the sections of one TOML file to pydantic-settings."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = read_toml(toml_path) if toml_path else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# settings_customise_sources is a classmethod with a fixed signature, so the
# chosen file is handed over per thread for the duration of one construction.
_pending = threading.local()


class HumanParseSettings(BaseSettings):
    """Resolved settings, stored on the CLI's AppContext.

    Attributes:
        config_path: The TOML file that was read, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "HUMANPARSE_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    byte_size: ByteSizeConfig = Field(default_factory=ByteSizeConfig)
    duration: DurationConfig = Field(default_factory=DurationConfig)
    timestamp: TimestampConfig = Field(default_factory=TimestampConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_path = getattr(_pending, "toml_path", None)
        return init_settings, env_settings, TomlSettingsSource(settings_cls, toml_path)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> HumanParseSettings:
        """Resolve settings the way the ``humanparse`` command does.

        Raises:
            click.ClickException: The config file is missing or not valid TOML.
        """
        import click

        try:
            toml_path = resolve_config(config_path, start)
            _pending.toml_path = toml_path
            return cls(config_path=toml_path, **cli_flags)
        except ConfigFileError as exc:
            raise click.ClickException(str(exc)) from exc
        finally:
            _pending.toml_path = None
