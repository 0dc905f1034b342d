"""Application services for the Source/Target interface.

Each inbound call runs inside one unit of work and commits once, so a sweep, the netting
step, the withdrawal of stale entries and the final upsert land in the staging log
together or not at all.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from nestlink.domain.feedback import (
    FeedbackBatch,
    apply_retention,
    extract_part_feedback,
    extract_program_feedback,
    extract_program_remnants,
    extract_program_sheets,
)
from nestlink.domain.model import InterfaceConfig
from nestlink.domain.reconciliation import (
    reconcile_demand,
    reconcile_inventory,
    reconcile_program_update,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from nestlink.domain.feedback import (
        PartFeedback,
        ProgramFeedback,
        ProgramRemnantFeedback,
        ProgramSheetFeedback,
    )
    from nestlink.domain.ports.unit_of_work import InterfaceUnitOfWork
    from nestlink.domain.reconciliation import (
        DemandPush,
        InventoryPush,
        ProgramUpdatePush,
        ReconcileResult,
    )

    type UnitOfWorkFactory = Callable[[], InterfaceUnitOfWork]

log = getLogger(__name__)


def push_demand(push: DemandPush, *, unit_of_work_factory: UnitOfWorkFactory) -> ReconcileResult:
    with unit_of_work_factory() as uow:
        result = reconcile_demand(push, uow.repositories)
        uow.commit()
    return result


def push_inventory(
    push: InventoryPush, *, unit_of_work_factory: UnitOfWorkFactory
) -> ReconcileResult:
    with unit_of_work_factory() as uow:
        result = reconcile_inventory(push, uow.repositories)
        uow.commit()
    return result


def push_program_update(
    push: ProgramUpdatePush, *, unit_of_work_factory: UnitOfWorkFactory
) -> ReconcileResult:
    with unit_of_work_factory() as uow:
        result = reconcile_program_update(push, uow.repositories)
        uow.commit()
    return result


def collect_feedback(*, unit_of_work_factory: UnitOfWorkFactory) -> FeedbackBatch:
    """Run the retention sweep, then extract program and part feedback."""

    with unit_of_work_factory() as uow:
        retention = apply_retention(uow.repositories.archives)
        batch = FeedbackBatch(
            retention=retention,
            programs=extract_program_feedback(uow.repositories.archives),
            parts=extract_part_feedback(uow.repositories),
        )
        uow.commit()
    log.info(
        "Collected feedback: programs=%d, parts=%d, purged=%d",
        len(batch.programs),
        len(batch.parts),
        retention.total,
    )
    return batch


def list_program_feedback(*, unit_of_work_factory: UnitOfWorkFactory) -> list[ProgramFeedback]:
    with unit_of_work_factory() as uow:
        apply_retention(uow.repositories.archives)
        feedback = extract_program_feedback(uow.repositories.archives)
        uow.commit()
    return feedback


def list_part_feedback(*, unit_of_work_factory: UnitOfWorkFactory) -> list[PartFeedback]:
    with unit_of_work_factory() as uow:
        apply_retention(uow.repositories.archives)
        feedback = extract_part_feedback(uow.repositories)
        uow.commit()
    return feedback


def list_program_sheets(*, unit_of_work_factory: UnitOfWorkFactory) -> list[ProgramSheetFeedback]:
    with unit_of_work_factory() as uow:
        return extract_program_sheets(uow.repositories)


def list_program_remnants(
    *, unit_of_work_factory: UnitOfWorkFactory
) -> list[ProgramRemnantFeedback]:
    with unit_of_work_factory() as uow:
        return extract_program_remnants(uow.repositories)


def delete_program_feedback(feedback_id: int, *, unit_of_work_factory: UnitOfWorkFactory) -> bool:
    """Acknowledge one program feedback row once the consumer has recorded it."""

    with unit_of_work_factory() as uow:
        removed = uow.repositories.archives.remove_program_record(feedback_id)
        uow.commit()
    if not removed:
        log.warning("Program feedback %s not found", feedback_id)
    return removed


def delete_part_feedback(feedback_id: int, *, unit_of_work_factory: UnitOfWorkFactory) -> bool:
    """Acknowledge one part feedback row once the consumer has recorded it."""

    with unit_of_work_factory() as uow:
        removed = uow.repositories.archives.remove_part_record(feedback_id)
        uow.commit()
    if not removed:
        log.warning("Part feedback %s not found", feedback_id)
    return removed


def configure_route(
    system: str,
    *,
    district: int,
    remnant_template: str | None,
    unit_of_work_factory: UnitOfWorkFactory,
) -> InterfaceConfig:
    """Create or replace the routing row for one Source system."""

    with unit_of_work_factory() as uow:
        config = uow.repositories.configs.get(system)
        if config is None:
            config = InterfaceConfig(
                system=system, district=district, remnant_template=remnant_template
            )
            uow.repositories.configs.add(config)
        else:
            config.district = district
            config.remnant_template = remnant_template
        uow.commit()
    log.info("Configured Source system %s -> district %s", system, district)
    return config
