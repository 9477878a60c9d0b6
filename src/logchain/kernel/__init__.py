"""Kernel – framework-agnostic building blocks."""

from logchain.kernel.errors import (
    ApplicationError,
    BaseError,
    DestinationDeliveryError,
    InfrastructureError,
    InvalidChainError,
    LoggerAlreadyCreatedError,
    UnknownSeverityError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DestinationDeliveryError",
    "InfrastructureError",
    "InvalidChainError",
    "LoggerAlreadyCreatedError",
    "UnknownSeverityError",
]
