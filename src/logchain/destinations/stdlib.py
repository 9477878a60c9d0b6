"""Destinations – StdlibLoggerDestination."""
from __future__ import annotations

import logging
from typing import Any


class StdlibLoggerDestination:
    """Forwards messages to a :mod:`logging` (or structlog) logger.

    Parameters
    ----------
    logger:
        Any object with a stdlib-style ``log(level, msg)`` method.  Defaults
        to the stdlib logger named ``logchain.messages``.
    level:
        Numeric stdlib level every forwarded message is logged at.
    """

    def __init__(self, logger: Any = None, level: int = logging.INFO) -> None:
        self._logger = logger if logger is not None else logging.getLogger("logchain.messages")
        self._level = level

    def deliver(self, formatted_message: str) -> None:
        self._logger.log(self._level, formatted_message)


__all__ = ["StdlibLoggerDestination"]
