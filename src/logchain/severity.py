"""Severity levels, canonical tags and match policies."""
from __future__ import annotations

import dataclasses
import logging
from enum import Enum
from typing import Callable

from logchain.kernel.errors import UnknownSeverityError


class Severity(Enum):
    """Closed set of message levels.

    The value is the stdlib :mod:`logging` numeric level, used as the rank
    for ordering comparisons.
    """

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    ERROR = logging.ERROR

    @property
    def rank(self) -> int:
        return self.value

    @property
    def tag(self) -> str:
        return self.name

    @classmethod
    def parse(cls, name: str | int | Severity) -> Severity:
        """Resolve a member, a case-insensitive name or a stdlib level number."""
        if isinstance(name, Severity):
            return name
        if isinstance(name, str):
            member = cls.__members__.get(name.strip().upper())
        elif isinstance(name, int) and not isinstance(name, bool):
            member = cls._value2member_map_.get(name)
        else:
            member = None
        if member is None:
            raise UnknownSeverityError(name)
        return member


def format_message(level: Severity, message: str) -> str:
    return f"{level.tag}: {message}"


@dataclasses.dataclass(frozen=True)
class LogMessage:
    """A message for the duration of one logging call."""

    level: Severity
    text: str

    @property
    def formatted(self) -> str:
        return format_message(self.level, self.text)


MatchPolicy = Callable[[Severity, Severity], bool]


def exact_match(message_level: Severity, handler_level: Severity) -> bool:
    """Only the handler configured for the message's own level acts."""
    return message_level is handler_level


def at_or_above(message_level: Severity, handler_level: Severity) -> bool:
    """Every handler whose level the message reaches acts."""
    return message_level.rank >= handler_level.rank


MATCH_POLICIES: dict[str, MatchPolicy] = {
    "exact": exact_match,
    "at_or_above": at_or_above,
}


__all__ = [
    "LogMessage",
    "MATCH_POLICIES",
    "MatchPolicy",
    "Severity",
    "at_or_above",
    "exact_match",
    "format_message",
]
