"""Shared pytest fixtures for humanparse tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from humanparse.config.settings import HumanParseSettings
from humanparse.services.parse import ParseService
from humanparse.services.telemetry import _active, disable_telemetry


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ``HUMANPARSE_*`` variables from the outer shell out of tests."""
    for name in list(os.environ):
        if name.startswith("HUMANPARSE_"):
            monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def _reset_cli_state() -> Generator[None]:
    """Undo logging and telemetry set up by ``--verbose`` CLI invocations."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    hp = logging.getLogger("humanparse")
    hp_level = hp.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    hp.setLevel(hp_level)
    disable_telemetry()
    _active.set(None)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Change CWD to an empty temp directory so no humanparse.toml is discovered.

    Tests that need a config file write it here.
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(workdir: Path) -> HumanParseSettings:
    """Default settings with no TOML file and no env overrides."""
    return HumanParseSettings.from_cli(start=workdir)


@pytest.fixture
def service(settings: HumanParseSettings) -> ParseService:
    """ParseService over default settings."""
    return ParseService(settings)
