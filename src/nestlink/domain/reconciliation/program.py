"""Program-update reconciliation."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from nestlink.domain.model import StagingEntry, TransType

from .contracts import Operation, ReconcileResult, ReconcileStatus
from .routing import resolve_route

if TYPE_CHECKING:
    from nestlink.domain.ports import InterfaceRepositories

    from .contracts import ProgramUpdatePush

log = getLogger(__name__)


def reconcile_program_update(
    push: ProgramUpdatePush, repositories: InterfaceRepositories
) -> ReconcileResult:
    """Stage acceptance of the program revision recorded under ``archive_packet_id``.

    The program must already exist in Target; callers sequence this after the create and
    delete entries for the program have drained. A missing program stages nothing.
    """

    event = push.event
    route = resolve_route(repositories.configs, event)
    if route is None:
        return ReconcileResult(
            operation=Operation.PROGRAM_UPDATE,
            event=event,
            status=ReconcileStatus.ROUTE_NOT_FOUND,
        )

    programs = repositories.programs.by_archive_packet(push.archive_packet_id)
    if not programs:
        log.warning(
            "No program for archive packet %s (event %s); nothing staged",
            push.archive_packet_id,
            event,
        )
        return ReconcileResult(
            operation=Operation.PROGRAM_UPDATE,
            event=event,
            status=ReconcileStatus.PROGRAM_NOT_FOUND,
        )

    for program in programs:
        repositories.staging.add(
            StagingEntry(
                trans_type=TransType.PROGRAM_REVISION_ACCEPT,
                district=route.district,
                event_id=event.event_id,
                truncated_event_id=event.truncated_id,
                program_name=program.program_name,
                program_repeat=program.repeat_id,
            )
        )
        log.info(
            "Staged revision accept for %s#%s (event %s)",
            program.program_name,
            program.repeat_id,
            event,
        )

    return ReconcileResult(
        operation=Operation.PROGRAM_UPDATE,
        event=event,
        status=ReconcileStatus.APPLIED,
        entries_written=len(programs),
    )
