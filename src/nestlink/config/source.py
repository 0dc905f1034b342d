"""Source system defaults used by the command line entry points."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import read_env_var
from .errors import ConfigurationError

SOURCE_SYSTEM_ENV: Final[str] = "NESTLINK_SOURCE_SYSTEM"
SOURCE_SYSTEM_MAX_LENGTH: Final[int] = 3


@dataclass(frozen=True, slots=True)
class SourceConfig:
    """Defaults applied to inbound Source payloads that omit them."""

    default_system: str | None = None


def get_source_config() -> SourceConfig:
    system = read_env_var(SOURCE_SYSTEM_ENV)
    if system is not None and len(system) > SOURCE_SYSTEM_MAX_LENGTH:
        raise ConfigurationError(
            f"{SOURCE_SYSTEM_ENV} must be at most {SOURCE_SYSTEM_MAX_LENGTH} characters: {system!r}"
        )
    return SourceConfig(default_system=system)
