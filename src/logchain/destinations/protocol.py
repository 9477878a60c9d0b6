"""Destinations – Destination protocol."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Destination(Protocol):
    """Capability: accept a formatted line and deliver it.

    Implementations either succeed or raise; the registry that calls
    ``deliver`` contains the failure.  Identity is what ``unregister`` uses,
    so do not override ``__eq__`` to compare by value.
    """

    def deliver(self, formatted_message: str) -> None: ...


__all__ = ["Destination"]
