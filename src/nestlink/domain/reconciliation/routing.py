"""Configuration resolver: Source system to Target district and remnant template."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nestlink.domain.model import InterfaceConfig, SourceEvent
    from nestlink.domain.ports import InterfaceConfigRepository

log = getLogger(__name__)


def resolve_route(configs: InterfaceConfigRepository, event: SourceEvent) -> InterfaceConfig | None:
    """Return the routing row for the event's Source system, logging a miss."""

    config = configs.get(event.system)
    if config is None:
        log.warning(
            "No interface configuration for Source system %r (event %s)", event.system, event
        )
    return config


def remnant_geometry_path(config: InterfaceConfig, sheet_name: str) -> str | None:
    path = config.remnant_path(sheet_name)
    if path is None:
        log.warning(
            "Source system %r has no remnant template; remnant %r staged without geometry",
            config.system,
            sheet_name,
        )
    return path
