"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError            (application.py)
    │   ├── LoggerAlreadyCreatedError
    │   ├── InvalidChainError
    │   ├── UnknownSeverityError
    │   └── ConfigError             (logchain.config.validation)
    └── InfrastructureError         (infrastructure.py)
        └── DestinationDeliveryError
"""

from logchain.kernel.errors.application import (
    ApplicationError,
    InvalidChainError,
    LoggerAlreadyCreatedError,
    UnknownSeverityError,
)
from logchain.kernel.errors.base import BaseError
from logchain.kernel.errors.infrastructure import (
    DestinationDeliveryError,
    InfrastructureError,
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
