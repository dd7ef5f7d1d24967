"""Locate and read ``humanparse.toml``.

Lookup order: an explicit path (``--config``), then the
``HUMANPARSE_CONFIG`` env var, then the nearest ``humanparse.toml`` found
by walking up from the working directory.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from humanparse.config.models import HumanParseConfig

CONFIG_FILENAME = "humanparse.toml"
CONFIG_ENV_VAR = "HUMANPARSE_CONFIG"


class ConfigFileError(ValueError):
    """A config file exists but cannot be used."""


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect for *start* (default: cwd), if any.

    When ``HUMANPARSE_CONFIG`` is set it is the only candidate; a missing
    file there means no config rather than falling back to the walk-up.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        candidate = Path(env_path)
        return candidate if candidate.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for parent in (directory, *directory.parents):
        candidate = parent / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config(explicit: str | Path | None = None, start: Path | None = None) -> Path | None:
    """Pick the config file: *explicit* if given, otherwise :func:`find_config`.

    Raises:
        ConfigFileError: *explicit* does not name an existing file.
    """
    if explicit is None:
        return find_config(start)
    path = Path(explicit)
    if not path.is_file():
        msg = f"Config file not found: {path}"
        raise ConfigFileError(msg)
    return path


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        ConfigFileError: The file is not valid TOML.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigFileError(msg) from exc


def load_config(path: Path | None = None, cwd: Path | None = None) -> HumanParseConfig:
    """Validate the TOML sections only, without env vars or CLI flags.

    Returns the defaults when no file is found.
    """
    path = path or find_config(cwd)
    if path is None:
        return HumanParseConfig()
    return HumanParseConfig.model_validate(read_toml(path))
