"""Routing – severity handler chain.

A chain is a flat, ordered tuple of links evaluated in a loop.  Every link
sees every message; the match policy decides which of them act.
"""
from __future__ import annotations

from typing import Iterable, Iterator, Protocol, Sequence

from logchain.kernel.errors import InvalidChainError
from logchain.observability import get_logger
from logchain.routing.registry import SubscriberRegistry
from logchain.severity import MatchPolicy, Severity, exact_match, format_message

_log = get_logger(__name__)

DEFAULT_ORDER: tuple[Severity, ...] = (Severity.INFO, Severity.ERROR, Severity.DEBUG)


class ChainLink(Protocol):
    """Anything owning one severity and able to handle a message."""

    severity: Severity

    def handle(self, level: Severity, message: str) -> bool: ...


class SeverityHandler:
    """Chain link responsible for one severity.

    When ``policy(level, self.severity)`` holds, the message is formatted with
    the tag of its own level and the registry notifies the destinations
    subscribed to ``self.severity``.
    """

    def __init__(
        self,
        severity: Severity,
        registry: SubscriberRegistry,
        policy: MatchPolicy = exact_match,
    ) -> None:
        self.severity = severity
        self._registry = registry
        self._policy = policy

    def handle(self, level: Severity, message: str) -> bool:
        if not self._policy(level, self.severity):
            return False
        self._registry.notify(self.severity, format_message(level, message))
        return True

    def __repr__(self) -> str:
        policy = getattr(self._policy, "__name__", repr(self._policy))
        return f"SeverityHandler({self.severity.name}, policy={policy})"


class HandlerChain:
    """Ordered links, exactly one per :class:`Severity` member."""

    def __init__(self, links: Iterable[ChainLink]) -> None:
        self._links: tuple[ChainLink, ...] = tuple(links)
        self._check_topology()

    def _check_topology(self) -> None:
        severities = [link.severity for link in self._links]
        duplicates = sorted({s.name for s in severities if severities.count(s) > 1})
        if duplicates:
            raise InvalidChainError(
                f"Duplicate handlers for {', '.join(duplicates)}",
                detail={"duplicates": duplicates},
            )
        missing = [s.name for s in Severity if s not in severities]
        if missing:
            raise InvalidChainError(
                f"No handler for {', '.join(missing)}",
                detail={"missing": missing},
            )

    @property
    def links(self) -> tuple[ChainLink, ...]:
        return self._links

    @property
    def order(self) -> tuple[Severity, ...]:
        return tuple(link.severity for link in self._links)

    def handle(self, level: Severity, message: str) -> int:
        """Offer the message to every link in order; return how many acted."""
        acted = 0
        for link in self._links:
            try:
                if link.handle(level, message):
                    acted += 1
            except Exception as exc:  # noqa: BLE001
                _log.error("chain_link_failed", link=repr(link), severity=level.name, error=repr(exc))
        return acted

    def __iter__(self) -> Iterator[ChainLink]:
        return iter(self._links)

    def __len__(self) -> int:
        return len(self._links)


class ChainBuilder:
    """Builds one :class:`SeverityHandler` per severity in *order*.

    Parameters
    ----------
    registry:
        Registry shared by every handler of the chain.
    order:
        Chain order; must name each severity exactly once.
    policy:
        Match predicate ``(message_level, handler_level) -> bool`` given to
        every handler.  :func:`~logchain.severity.exact_match` by default.
    """

    def __init__(
        self,
        registry: SubscriberRegistry,
        *,
        order: Sequence[Severity] = DEFAULT_ORDER,
        policy: MatchPolicy = exact_match,
    ) -> None:
        self._registry = registry
        self._order = tuple(order)
        self._policy = policy

    def build(self) -> HandlerChain:
        return HandlerChain(
            SeverityHandler(severity, self._registry, self._policy) for severity in self._order
        )


__all__ = ["DEFAULT_ORDER", "ChainBuilder", "ChainLink", "HandlerChain", "SeverityHandler"]
