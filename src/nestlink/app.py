"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from nestlink.adapters.source import (
    parse_demand_push,
    parse_inventory_push,
    parse_program_update_push,
)
from nestlink.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork, is_started, startup
from nestlink.domain.data_integration import (
    collect_feedback,
    configure_route,
    delete_part_feedback,
    delete_program_feedback,
    list_program_remnants,
    list_program_sheets,
    push_demand,
    push_inventory,
    push_program_update,
)
from nestlink.domain.ports.unit_of_work import InterfaceUnitOfWork

if TYPE_CHECKING:
    from collections.abc import Iterable

    from nestlink.adapters.source import (
        DemandPayloadInput,
        InventoryPayloadInput,
        ProgramUpdatePayloadInput,
    )
    from nestlink.config import SourceConfig
    from nestlink.domain.feedback import (
        FeedbackBatch,
        ProgramRemnantFeedback,
        ProgramSheetFeedback,
    )
    from nestlink.domain.model import InterfaceConfig
    from nestlink.domain.reconciliation import ReconcileResult

UnitOfWorkFactory = Callable[[], InterfaceUnitOfWork]


log = getLogger(__name__)


def _resolve_unit_of_work(unit_of_work_factory: UnitOfWorkFactory | None) -> UnitOfWorkFactory:
    if unit_of_work_factory is not None:
        return unit_of_work_factory
    if not is_started():
        startup()
    return SqlAlchemyUnitOfWork


def _log_result(result: ReconcileResult) -> None:
    log.info(
        "%s %s: status=%s, swept=%s, written=%d, withdrawn=%d",
        result.operation,
        result.event,
        result.status,
        result.swept,
        result.entries_written,
        result.entries_withdrawn,
    )


def push_source_demand(
    payloads: Iterable[DemandPayloadInput],
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    source: SourceConfig | None = None,
) -> list[ReconcileResult]:
    """Apply Source demand calls in order, one unit of work per call."""

    effective_uow = _resolve_unit_of_work(unit_of_work_factory)
    results: list[ReconcileResult] = []
    for payload in payloads:
        result = push_demand(
            parse_demand_push(payload, source=source), unit_of_work_factory=effective_uow
        )
        _log_result(result)
        results.append(result)
    return results


def push_source_inventory(
    payloads: Iterable[InventoryPayloadInput],
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    source: SourceConfig | None = None,
) -> list[ReconcileResult]:
    """Apply Source inventory calls in order, one unit of work per call."""

    effective_uow = _resolve_unit_of_work(unit_of_work_factory)
    results: list[ReconcileResult] = []
    for payload in payloads:
        result = push_inventory(
            parse_inventory_push(payload, source=source), unit_of_work_factory=effective_uow
        )
        _log_result(result)
        results.append(result)
    return results


def push_source_program_update(
    payloads: Iterable[ProgramUpdatePayloadInput],
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    source: SourceConfig | None = None,
) -> list[ReconcileResult]:
    effective_uow = _resolve_unit_of_work(unit_of_work_factory)
    results: list[ReconcileResult] = []
    for payload in payloads:
        result = push_program_update(
            parse_program_update_push(payload, source=source), unit_of_work_factory=effective_uow
        )
        _log_result(result)
        results.append(result)
    return results


def export_feedback(*, unit_of_work_factory: UnitOfWorkFactory | None = None) -> FeedbackBatch:
    return collect_feedback(unit_of_work_factory=_resolve_unit_of_work(unit_of_work_factory))


def export_program_sheets(
    *, unit_of_work_factory: UnitOfWorkFactory | None = None
) -> list[ProgramSheetFeedback]:
    return list_program_sheets(unit_of_work_factory=_resolve_unit_of_work(unit_of_work_factory))


def export_program_remnants(
    *, unit_of_work_factory: UnitOfWorkFactory | None = None
) -> list[ProgramRemnantFeedback]:
    return list_program_remnants(unit_of_work_factory=_resolve_unit_of_work(unit_of_work_factory))


def acknowledge_program_feedback(
    feedback_id: int, *, unit_of_work_factory: UnitOfWorkFactory | None = None
) -> bool:
    return delete_program_feedback(
        feedback_id, unit_of_work_factory=_resolve_unit_of_work(unit_of_work_factory)
    )


def acknowledge_part_feedback(
    feedback_id: int, *, unit_of_work_factory: UnitOfWorkFactory | None = None
) -> bool:
    return delete_part_feedback(
        feedback_id, unit_of_work_factory=_resolve_unit_of_work(unit_of_work_factory)
    )


def configure_district(
    system: str,
    *,
    district: int,
    remnant_template: str | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> InterfaceConfig:
    """Route a Source system to a Target district."""

    return configure_route(
        system,
        district=district,
        remnant_template=remnant_template,
        unit_of_work_factory=_resolve_unit_of_work(unit_of_work_factory),
    )
