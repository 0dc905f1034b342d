"""Logging setup for the nestlink entry points."""

from __future__ import annotations

import logging
from typing import Final

from .env import read_env_var

LOG_LEVEL_ENV: Final[str] = "NESTLINK_LOG_LEVEL"

# Library loggers held at WARNING unless DEBUG is requested.
_QUIET_LOGGERS: Final[tuple[str, ...]] = ("alembic", "sqlalchemy.engine")


def resolve_log_level(default: int = logging.INFO) -> int:
    """Return the level named by ``NESTLINK_LOG_LEVEL`` or ``default`` when unset/unknown."""

    name = read_env_var(LOG_LEVEL_ENV)
    if name is None:
        return default
    level = logging.getLevelNamesMapping().get(name.upper())
    return default if level is None else level


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once.

    ``level`` defaults to ``NESTLINK_LOG_LEVEL`` (falling back to INFO). Library loggers
    stay at WARNING unless DEBUG is requested. Pass ``force=True`` to reconfigure during
    tests.
    """

    effective = resolve_log_level() if level is None else level
    logging.basicConfig(
        level=effective,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(effective, logging.WARNING))
