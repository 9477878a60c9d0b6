"""Config settings – SettingsFactory."""
from __future__ import annotations

from typing import Any, Sequence, TypeVar

from logchain.config.settings.base import Settings
from logchain.config.settings.loaders import SettingsLoader
from logchain.config.validation.errors import ConfigError
from logchain.observability import get_logger

T = TypeVar("T", bound=Settings)

_log = get_logger(__name__)


class SettingsFactory:
    """Merge several settings sources into one settings instance."""

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Parameters
        ----------
        settings_cls:
            The :class:`~logchain.config.settings.base.Settings` subclass to
            construct.
        loaders:
            Applied in order; later loaders win on field conflicts.  A loader
            whose source is unavailable is skipped with a
            ``settings_loader_skipped`` warning.
        overrides:
            Key-value pairs applied after all loaders.

        Raises
        ------
        ConfigError
            When a loader or the final construction rejects a value.
        """
        merged: dict[str, Any] = {}

        for loader in loaders or []:
            try:
                instance = loader.load(settings_cls)
            except ConfigError:
                raise
            except Exception as exc:  # noqa: BLE001 – source unavailable
                _log.warning(
                    "settings_loader_skipped",
                    loader=type(loader).__name__,
                    error=repr(exc),
                )
                continue
            merged.update(instance.as_dict())

        if overrides:
            merged.update(overrides)

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}") from exc


__all__ = ["SettingsFactory"]
