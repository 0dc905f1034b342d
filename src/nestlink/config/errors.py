"""Errors raised while resolving nestlink configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class ConfigurationError(RuntimeError):
    """Raised when a configuration value is present but unusable."""


class MissingConfigurationError(ConfigurationError):
    """Raised when required settings (environment variables, Source defaults) are unset."""

    def __init__(self, message: str, *, names: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.names = tuple(names)
