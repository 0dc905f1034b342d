"""Application configuration helpers."""

from __future__ import annotations

from .env import read_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .logging import configure_logging
from .source import SourceConfig, get_source_config
from .storage import (
    DatabaseConfig,
    StorageConfig,
    get_database_config,
    get_database_uri,
    get_storage_config,
)

__all__ = [
    "ConfigurationError",
    "DatabaseConfig",
    "MissingConfigurationError",
    "SourceConfig",
    "StorageConfig",
    "configure_logging",
    "get_database_config",
    "get_database_uri",
    "get_source_config",
    "get_storage_config",
    "read_env_var",
    "require_env_var",
    "require_env_vars",
]
