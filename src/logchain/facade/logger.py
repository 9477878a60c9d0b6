"""Facade – Logger, the entry point application code calls."""
from __future__ import annotations

from logchain.routing.chain import HandlerChain
from logchain.routing.registry import SubscriberRegistry
from logchain.severity import LogMessage, Severity


class Logger:
    """One method per severity, each routed through the handler chain.

    A ``Logger`` is a plain handle: build it once at process start (see
    :class:`~logchain.facade.manager.LogManager`) and pass it to the code
    that needs it.  Delivery failures never propagate out of these methods.
    """

    def __init__(self, chain: HandlerChain, registry: SubscriberRegistry) -> None:
        self._chain = chain
        self._registry = registry

    @property
    def chain(self) -> HandlerChain:
        return self._chain

    @property
    def registry(self) -> SubscriberRegistry:
        return self._registry

    def info(self, message: str) -> None:
        self.log(Severity.INFO, message)

    def error(self, message: str) -> None:
        self.log(Severity.ERROR, message)

    def debug(self, message: str) -> None:
        self.log(Severity.DEBUG, message)

    def log(self, level: Severity | str | int, message: str) -> None:
        entry = LogMessage(Severity.parse(level), message)
        self._chain.handle(entry.level, entry.text)


__all__ = ["Logger"]
