"""Infrastructure errors — I/O failures inside destinations."""

from __future__ import annotations

from typing import Any

from logchain.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure."""

    code = "infrastructure_error"


class DestinationDeliveryError(InfrastructureError):
    """A destination failed to deliver a formatted message."""

    code = "destination_delivery_failed"

    def __init__(
        self,
        destination: Any,
        level: Any,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        name = type(destination).__name__
        super().__init__(message or f"Destination '{name}' failed to deliver", **kwargs)
        self.destination = destination
        self.level = level

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["destination"] = type(self.destination).__name__
        payload["level"] = getattr(self.level, "name", str(self.level))
        return payload


__all__ = ["DestinationDeliveryError", "InfrastructureError"]
