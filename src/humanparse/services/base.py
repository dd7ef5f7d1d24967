"""BaseService — settings holder shared by the parse services."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from humanparse.domain.errors import ParseError
from humanparse.services.result import ServiceResult

if TYPE_CHECKING:
    from humanparse.config.settings import HumanParseSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Holds the resolved :class:`HumanParseSettings`.

    Without explicit settings, defaults are resolved the same way the CLI
    does it (env vars, then ``humanparse.toml``).
    """

    def __init__(self, settings: HumanParseSettings | None = None) -> None:
        if settings is None:
            from humanparse.config.settings import HumanParseSettings

            settings = HumanParseSettings.from_cli()
        self._settings = settings

    @staticmethod
    def _failure(op: str, text: str, exc: ParseError) -> ServiceResult:
        logger.debug("%s rejected %r: %s", op, text, exc.kind.value)
        return ServiceResult.failure(op, text, exc)
