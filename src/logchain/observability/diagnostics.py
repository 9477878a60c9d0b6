"""Observability – structlog diagnostics logger.

Delivery failures and lifecycle events of logchain itself are reported here,
never through the routed destinations.
"""
from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog

DIAGNOSTICS_LOGGER = "logchain"


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


class _DiagnosticsHandler(logging.StreamHandler):
    """Marker type so repeated configuration replaces rather than stacks."""


class DiagnosticsLoggerFactory:
    """Route logchain's diagnostics to a JSON handler on the ``logchain`` logger.

    Only the ``logchain`` stdlib logger gets a handler, and propagation from
    it is switched off, so the host application's root logging is left
    alone.  structlog is pointed at stdlib only when the host has not
    configured structlog itself.
    """

    @staticmethod
    def configure(level: int = logging.WARNING, stream: TextIO | None = None) -> logging.Logger:
        if not structlog.is_configured():
            structlog.configure(
                processors=[
                    structlog.contextvars.merge_contextvars,
                    structlog.stdlib.filter_by_level,
                    structlog.stdlib.add_logger_name,
                    structlog.stdlib.add_log_level,
                    structlog.processors.TimeStamper(fmt="iso"),
                    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
                ],
                logger_factory=structlog.stdlib.LoggerFactory(),
                wrapper_class=structlog.stdlib.BoundLogger,
            )
        handler = _DiagnosticsHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processors=[
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    structlog.processors.JSONRenderer(),
                ],
            )
        )
        target = logging.getLogger(DIAGNOSTICS_LOGGER)
        for existing in [h for h in target.handlers if isinstance(h, _DiagnosticsHandler)]:
            target.removeHandler(existing)
        target.addHandler(handler)
        target.setLevel(level)
        target.propagate = False
        return target


__all__ = ["DIAGNOSTICS_LOGGER", "DiagnosticsLoggerFactory", "get_logger"]
