"""Facade – LogManager, the single access point for the shared Logger.

States: *uninitialized* until the first :meth:`LogManager.get_logger` or
:meth:`LogManager.create`, then *ready* for the rest of the process.
Construction runs at most once; every caller sees the finished Logger.
"""
from __future__ import annotations

import threading
from typing import Any, Callable, Mapping

from logchain.config.settings import LoggingSettings
from logchain.destinations import Destination
from logchain.facade.logger import Logger
from logchain.kernel.errors import LoggerAlreadyCreatedError
from logchain.observability import DiagnosticsLoggerFactory
from logchain.observability import get_logger as get_diagnostics_logger
from logchain.routing.chain import ChainBuilder
from logchain.routing.registry import ErrorReporter
from logchain.routing.wiring import Wiring, resolve_policy, wire_from_settings

_log = get_diagnostics_logger(__name__)


def build_logger(
    settings: LoggingSettings | None = None,
    *,
    wiring: Wiring | None = None,
    destinations: Mapping[str, Destination] | None = None,
    error_reporter: ErrorReporter | None = None,
) -> Logger:
    """Wire a registry and chain from *settings* and return a new Logger.

    Parameters
    ----------
    settings:
        Defaults to :meth:`LoggingSettings.load` (``LOGCHAIN_*`` variables).
    wiring:
        Level → destinations table; defaults to ``settings.routes``.
    destinations:
        Named destinations that take precedence over the built-in
        ``console`` / ``file`` / ``database`` ones.
    error_reporter:
        Receives every destination delivery failure.
    """
    settings = settings if settings is not None else LoggingSettings.load()
    registry = wire_from_settings(settings, wiring, destinations, error_reporter=error_reporter)
    chain = ChainBuilder(
        registry,
        order=settings.severity_order(),
        policy=resolve_policy(settings.match_policy),
    ).build()
    return Logger(chain, registry)


class LogManager:
    """Owns the one shared :class:`Logger` of a process.

    Parameters
    ----------
    settings_source:
        Zero-argument callable returning the settings used by lazy
        construction in :meth:`get_logger`.
    """

    def __init__(self, settings_source: Callable[[], LoggingSettings] | None = None) -> None:
        self._settings_source = settings_source or LoggingSettings.load
        self._lock = threading.Lock()
        self._logger: Logger | None = None

    @property
    def is_ready(self) -> bool:
        return self._logger is not None

    def get_logger(self) -> Logger:
        """Return the shared Logger, building it on first access."""
        logger = self._logger
        if logger is not None:
            return logger
        with self._lock:
            if self._logger is None:
                self._logger = self._build(self._settings_source())
            return self._logger

    def create(
        self,
        settings: LoggingSettings | None = None,
        *,
        wiring: Wiring | None = None,
        destinations: Mapping[str, Destination] | None = None,
        error_reporter: ErrorReporter | None = None,
    ) -> Logger:
        """Build the shared Logger explicitly, typically at process start.

        Raises
        ------
        LoggerAlreadyCreatedError
            When the shared Logger already exists.
        """
        with self._lock:
            if self._logger is not None:
                raise LoggerAlreadyCreatedError(detail={"manager": repr(self)})
            self._logger = self._build(
                settings if settings is not None else self._settings_source(),
                wiring=wiring,
                destinations=destinations,
                error_reporter=error_reporter,
            )
            return self._logger

    def close(self) -> int:
        """Close destinations that support it; the manager stays ready.

        A destination whose ``close()`` raises is reported as
        ``destination_close_failed`` and the remaining ones are still closed.
        Returns the number of destinations closed cleanly.
        """
        logger = self._logger
        if logger is None:
            return 0
        closed = 0
        for destination in logger.registry.all_destinations():
            close = getattr(destination, "close", None)
            if not callable(close):
                continue
            try:
                close()
            except Exception as exc:  # noqa: BLE001
                _log.error("destination_close_failed", destination=repr(destination), error=repr(exc))
                continue
            closed += 1
        return closed

    def _build(self, settings: LoggingSettings, **kwargs: Any) -> Logger:
        if settings.diagnostics:
            DiagnosticsLoggerFactory.configure(settings.diagnostics_levelno)
        logger = build_logger(settings, **kwargs)
        _log.debug(
            "logchain.ready",
            order=[s.name for s in logger.chain.order],
            match_policy=settings.match_policy,
            levels=[s.name for s in logger.registry.levels()],
        )
        return logger


_default_manager = LogManager()


def get_logger() -> Logger:
    """The process-wide Logger of the default manager."""
    return _default_manager.get_logger()


def create_logger(
    settings: LoggingSettings | None = None,
    *,
    wiring: Wiring | None = None,
    destinations: Mapping[str, Destination] | None = None,
    error_reporter: ErrorReporter | None = None,
) -> Logger:
    """Explicitly build the default manager's Logger; fails if it exists."""
    return _default_manager.create(
        settings,
        wiring=wiring,
        destinations=destinations,
        error_reporter=error_reporter,
    )


__all__ = ["LogManager", "build_logger", "create_logger", "get_logger"]
