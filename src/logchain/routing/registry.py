"""Routing – SubscriberRegistry.

Maps each severity to the ordered destinations subscribed to it and fans a
formatted message out to them.
"""
from __future__ import annotations

import threading
from typing import Callable

from logchain.destinations.protocol import Destination
from logchain.kernel.errors import DestinationDeliveryError
from logchain.observability import get_logger
from logchain.severity import Severity

_log = get_logger(__name__)

ErrorReporter = Callable[[DestinationDeliveryError], None]


def log_delivery_failure(error: DestinationDeliveryError) -> None:
    """Default reporter: a warning on the diagnostics logger."""
    _log.warning(
        "destination_delivery_failed",
        destination=repr(error.destination),
        severity=error.level.name,
        error=repr(error.cause),
    )


class SubscriberRegistry:
    """Level-keyed list of destinations with failure-isolated fan-out.

    Registration order is notification order.  ``notify`` copies the level's
    list under the lock and delivers outside it, so a concurrent
    ``register``/``unregister`` never changes an in-flight delivery loop.

    Parameters
    ----------
    error_reporter:
        Called with a :class:`DestinationDeliveryError` whenever a
        destination raises.  Defaults to :func:`log_delivery_failure`.
    """

    def __init__(self, error_reporter: ErrorReporter | None = None) -> None:
        self._subscribers: dict[Severity, list[Destination]] = {}
        self._lock = threading.RLock()
        self._error_reporter = error_reporter or log_delivery_failure

    def register(self, level: Severity, destination: Destination) -> None:
        """Append *destination* to *level*; duplicates are kept."""
        with self._lock:
            self._subscribers.setdefault(level, []).append(destination)

    def unregister(self, destination: Destination) -> None:
        """Remove every occurrence of *destination* (by identity) from all levels."""
        with self._lock:
            for level in list(self._subscribers):
                remaining = [d for d in self._subscribers[level] if d is not destination]
                if remaining:
                    self._subscribers[level] = remaining
                else:
                    del self._subscribers[level]

    def notify(self, level: Severity, message: str) -> int:
        """Deliver *message* to every destination of *level*.

        Returns the number of successful deliveries; ``0`` when nothing is
        registered for *level*.
        """
        targets = self.destinations(level)
        delivered = 0
        for destination in targets:
            try:
                destination.deliver(message)
            except Exception as exc:  # noqa: BLE001
                self._report(DestinationDeliveryError(destination, level, cause=exc))
                continue
            delivered += 1
        return delivered

    def destinations(self, level: Severity) -> tuple[Destination, ...]:
        """Snapshot of the destinations subscribed to *level*."""
        with self._lock:
            return tuple(self._subscribers.get(level, ()))

    def levels(self) -> tuple[Severity, ...]:
        """Levels with at least one subscriber, in first-registration order."""
        with self._lock:
            return tuple(self._subscribers)

    def all_destinations(self) -> list[Destination]:
        """Distinct destinations across all levels, first occurrence first."""
        seen: list[Destination] = []
        with self._lock:
            for targets in self._subscribers.values():
                for destination in targets:
                    if not any(d is destination for d in seen):
                        seen.append(destination)
        return seen

    def _report(self, error: DestinationDeliveryError) -> None:
        try:
            self._error_reporter(error)
        except Exception as exc:  # noqa: BLE001
            _log.error(
                "error_reporter_failed",
                reporter=repr(self._error_reporter),
                error=repr(exc),
                original=repr(error.cause),
            )


__all__ = ["ErrorReporter", "SubscriberRegistry", "log_delivery_failure"]
