"""Identity of one logical unit of work pushed by Source."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

EVENT_ID_MAX_DIGITS: Final[int] = 20
TRUNCATED_ID_LENGTH: Final[int] = 10
SYSTEM_MAX_LENGTH: Final[int] = 3


class InvalidSourceEventError(ValueError):
    """Raised when a Source event identity is malformed."""


@dataclass(frozen=True, slots=True)
class SourceEvent:
    """One logical Source event; several calls may share the same ``event_id``.

    ``event_id`` is the idempotency key. ``truncated_id`` keeps the lowest ten digits for
    log correlation and the staging log's diagnostic column only; collisions there are
    harmless because nothing keys on it.
    """

    system: str
    event_id: str

    def __post_init__(self) -> None:
        system = self.system.strip()
        event_id = self.event_id.strip()
        if not system or len(system) > SYSTEM_MAX_LENGTH:
            raise InvalidSourceEventError(f"Invalid Source system code: {self.system!r}")
        if not event_id.isdigit() or len(event_id) > EVENT_ID_MAX_DIGITS:
            raise InvalidSourceEventError(f"Invalid Source event id: {self.event_id!r}")
        object.__setattr__(self, "system", system)
        object.__setattr__(self, "event_id", event_id)

    @property
    def truncated_id(self) -> str:
        return self.event_id[-TRUNCATED_ID_LENGTH:]

    def __str__(self) -> str:
        return f"{self.system}/{self.truncated_id}"
