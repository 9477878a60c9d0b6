"""Routing – static wiring table (level → destinations).

A wiring entry is either a destination name, resolved against a name →
destination mapping, or a destination object used as-is.  The same name under
several levels resolves to the same object, so ``unregister`` removes it
everywhere.
"""
from __future__ import annotations

from typing import Mapping, Sequence, Union

from logchain.config.settings import LoggingSettings
from logchain.config.validation import InvalidSettingValueError
from logchain.destinations import (
    ConsoleDestination,
    DatabaseDestination,
    Destination,
    FileDestination,
)
from logchain.kernel.errors import UnknownSeverityError
from logchain.routing.registry import ErrorReporter, SubscriberRegistry
from logchain.severity import MATCH_POLICIES, MatchPolicy, Severity

WiringEntry = Union[str, Destination]
Wiring = Mapping[Severity, Sequence[WiringEntry]]

DEFAULT_WIRING: dict[Severity, tuple[str, ...]] = {
    Severity.INFO: ("console",),
    Severity.ERROR: ("console", "file"),
    Severity.DEBUG: ("console",),
}


def default_wiring() -> dict[Severity, tuple[str, ...]]:
    """Console on every level, file on ERROR only."""
    return dict(DEFAULT_WIRING)


def parse_routes(text: str) -> dict[Severity, tuple[str, ...]]:
    """Parse ``"info=console;error=console,file"`` into a wiring table.

    A level listed twice has its destinations concatenated.  Empty segments
    are ignored.
    """
    wiring: dict[Severity, tuple[str, ...]] = {}
    for segment in text.split(";"):
        if not segment.strip():
            continue
        level_name, sep, names = segment.partition("=")
        if not sep:
            raise InvalidSettingValueError("routes", segment, "expected 'level=destination[,destination]'")
        try:
            level = Severity.parse(level_name)
        except UnknownSeverityError as exc:
            raise InvalidSettingValueError("routes", segment, exc.message) from exc
        targets = tuple(n.strip() for n in names.split(",") if n.strip())
        wiring[level] = wiring.get(level, ()) + targets
    return wiring


def resolve_policy(name: str) -> MatchPolicy:
    try:
        return MATCH_POLICIES[name]
    except KeyError:
        raise InvalidSettingValueError(
            "match_policy", name, f"expected one of {sorted(MATCH_POLICIES)}"
        ) from None


def _referenced_names(wiring: Wiring) -> list[str]:
    names: list[str] = []
    for entries in wiring.values():
        for entry in entries:
            if isinstance(entry, str) and entry not in names:
                names.append(entry)
    return names


def build_destinations(settings: LoggingSettings, names: Sequence[str]) -> dict[str, Destination]:
    """Instantiate the built-in destinations named in *names*.

    Known names: ``console``, ``file`` (``settings.file_path``) and
    ``database`` (``settings.database_url``, required when routed).
    """
    built: dict[str, Destination] = {}
    for name in names:
        if name == "console":
            built[name] = ConsoleDestination()
        elif name == "file":
            built[name] = FileDestination(settings.file_path)
        elif name == "database":
            if not settings.database_url:
                raise InvalidSettingValueError(
                    "database_url", settings.database_url, "required when 'database' is routed"
                )
            built[name] = DatabaseDestination(settings.database_url, settings.database_table)
        else:
            raise InvalidSettingValueError("routes", name, "unknown destination name")
    return built


def build_registry(
    wiring: Wiring,
    destinations: Mapping[str, Destination] | None = None,
    *,
    error_reporter: ErrorReporter | None = None,
) -> SubscriberRegistry:
    """Populate a :class:`SubscriberRegistry` from *wiring*.

    Raises
    ------
    InvalidSettingValueError
        When a name in *wiring* is missing from *destinations*.
    """
    named = destinations or {}
    registry = SubscriberRegistry(error_reporter)
    for level, entries in wiring.items():
        for entry in entries:
            if isinstance(entry, str):
                if entry not in named:
                    raise InvalidSettingValueError("routes", entry, "no destination with this name")
                registry.register(level, named[entry])
            else:
                registry.register(level, entry)
    return registry


def wire_from_settings(
    settings: LoggingSettings,
    wiring: Wiring | None = None,
    destinations: Mapping[str, Destination] | None = None,
    *,
    error_reporter: ErrorReporter | None = None,
) -> SubscriberRegistry:
    """Registry for *settings*: explicit *destinations* win over built-ins."""
    table: Wiring = wiring if wiring is not None else parse_routes(settings.routes)
    provided = dict(destinations or {})
    missing = [n for n in _referenced_names(table) if n not in provided]
    provided.update(build_destinations(settings, missing))
    return build_registry(table, provided, error_reporter=error_reporter)


__all__ = [
    "DEFAULT_WIRING",
    "Wiring",
    "WiringEntry",
    "build_destinations",
    "build_registry",
    "default_wiring",
    "parse_routes",
    "resolve_policy",
    "wire_from_settings",
]
