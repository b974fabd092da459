"""Error reporting for score store failures."""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class ErrorReporter(Protocol):
    """Receives every failure the score store catches."""

    def report(
        self, message: str, cause: BaseException | None, fatal: bool
    ) -> None: ...


class LoggingErrorReporter:
    """Report failures to the ``beatscore`` log.

    Fatal reports are logged as critical. The store raises the fatal error
    itself after reporting, so the caller decides how to halt.
    """

    def __init__(self, log: logging.Logger | None = None):
        self._log = log or logger

    def report(
        self, message: str, cause: BaseException | None, fatal: bool
    ) -> None:
        # Store errors wrap the engine error; log the engine's message
        origin = getattr(cause, "__cause__", None) or cause
        text = f"{message} ({origin})" if origin is not None else message
        if fatal:
            self._log.critical(text, exc_info=origin)
        else:
            self._log.error(text)
