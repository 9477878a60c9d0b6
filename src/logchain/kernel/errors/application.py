"""Application-layer errors — misuse of the logging API or its wiring."""

from __future__ import annotations

from typing import Any

from logchain.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Programmer or configuration error surfaced to the caller."""

    code = "application_error"


class LoggerAlreadyCreatedError(ApplicationError):
    """The shared logger was already constructed; a second one is refused."""

    code = "logger_already_created"

    def __init__(self, message: str = "Logger already created", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class InvalidChainError(ApplicationError):
    """A handler chain does not hold exactly one handler per severity."""

    code = "invalid_chain"


class UnknownSeverityError(ApplicationError):
    """A name could not be resolved to a severity."""

    code = "unknown_severity"

    def __init__(self, name: object, **kwargs: Any) -> None:
        super().__init__(f"Unknown severity {name!r}", **kwargs)
        self.name = name


__all__ = [
    "ApplicationError",
    "InvalidChainError",
    "LoggerAlreadyCreatedError",
    "UnknownSeverityError",
]
