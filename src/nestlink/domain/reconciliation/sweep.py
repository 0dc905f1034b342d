"""Idempotency gate and preemptive removal sweep.

Source does not always announce deletions. The first call of every event therefore stages
a removal-leaning entry for each record Target knows under the event's subject; later steps
of the same event withdraw or supersede the entries for records Source still has.

The staging log doubles as the idempotency ledger: the sweep runs only while no staged
entry carries the event id. Concurrent delivery of one event id can still run two sweeps;
Source serialises calls per event and nothing here guards against that.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from nestlink.domain.model import SourceEvent, StagingEntry
    from nestlink.domain.ports import StagingRepository

log = getLogger(__name__)


@dataclass(slots=True)
class SweepOutcome:
    executed: bool
    entries: list[StagingEntry] = field(default_factory=list["StagingEntry"])


def should_sweep(staging: StagingRepository, event: SourceEvent) -> bool:
    return not staging.has_event(event.event_id)


def sweep[TRecord](
    staging: StagingRepository,
    event: SourceEvent,
    *,
    candidates: Callable[[], Iterable[TRecord]],
    last_seen: Callable[[TRecord], str | None],
    removal: Callable[[TRecord], StagingEntry],
) -> SweepOutcome:
    """Stage ``removal(record)`` for every candidate not already tagged with this event.

    Records whose last-seen tag equals the current event were written by this very event
    (the transfer process drained part of it mid-push) and are left alone.
    """

    if not should_sweep(staging, event):
        log.debug("Event %s already staged; skipping sweep", event)
        return SweepOutcome(executed=False)

    entries: list[StagingEntry] = []
    for record in candidates():
        if last_seen(record) == event.event_id:
            continue
        entry = removal(record)
        staging.add(entry)
        entries.append(entry)

    log.info("Sweep for event %s staged %d entries", event, len(entries))
    return SweepOutcome(executed=True, entries=entries)
