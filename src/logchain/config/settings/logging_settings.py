"""Config settings – LoggingSettings for the shared logger."""
from __future__ import annotations

import dataclasses
import logging
from typing import Any, ClassVar

from logchain.config.settings.base import Settings
from logchain.config.settings.factory import SettingsFactory
from logchain.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from logchain.config.validation.errors import InvalidSettingValueError
from logchain.kernel.errors import UnknownSeverityError
from logchain.severity import MATCH_POLICIES, Severity

_DIAGNOSTICS_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclasses.dataclass
class LoggingSettings(Settings):
    """Wiring and destination options, read from ``LOGCHAIN_*`` variables.

    ``routes`` uses the form ``level=dest[,dest...]`` with levels separated by
    ``;``.  ``order`` lists the severities in chain order.

    With ``match_policy="at_or_above"`` a message reaches every level it
    ranks at or above, so a destination routed on several of those levels
    receives it once per level (the default routes print an ERROR to the
    console three times).

    ``diagnostics`` turns on JSON output of logchain's own warnings (failed
    deliveries, skipped settings sources) at ``diagnostics_level``.
    """

    _prefix: ClassVar[str] = "LOGCHAIN"

    routes: str = "info=console;error=console,file;debug=console"
    order: str = "info,error,debug"
    match_policy: str = "exact"
    file_path: str = "logchain.log"
    database_url: str = ""
    database_table: str = "log_messages"
    diagnostics: bool = False
    diagnostics_level: str = "WARNING"

    def _validate(self) -> None:
        if self.match_policy not in MATCH_POLICIES:
            raise InvalidSettingValueError(
                "match_policy",
                self.match_policy,
                f"expected one of {sorted(MATCH_POLICIES)}",
            )
        try:
            self.severity_order()
        except UnknownSeverityError as exc:
            raise InvalidSettingValueError("order", self.order, exc.message) from exc
        if self.diagnostics_level.upper() not in _DIAGNOSTICS_LEVELS:
            raise InvalidSettingValueError(
                "diagnostics_level", self.diagnostics_level, f"expected one of {list(_DIAGNOSTICS_LEVELS)}"
            )

    @classmethod
    def load(cls, env_file: str | None = None, **overrides: Any) -> LoggingSettings:
        """Read settings from the environment (and *env_file* when given).

        Raises
        ------
        InvalidSettingValueError
            When any ``LOGCHAIN_*`` value or override is invalid.
        """
        loaders: list[SettingsLoader] = [EnvSettingsLoader()]
        if env_file is not None:
            loaders.append(DotenvSettingsLoader(env_file))
        return SettingsFactory.create(cls, loaders, overrides or None)

    def severity_order(self) -> tuple[Severity, ...]:
        """Parse ``order`` into a tuple of severities."""
        return tuple(Severity.parse(name) for name in self.order.split(",") if name.strip())

    @property
    def diagnostics_levelno(self) -> int:
        return logging.getLevelName(self.diagnostics_level.upper())


__all__ = ["LoggingSettings"]
