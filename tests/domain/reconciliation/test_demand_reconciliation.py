from __future__ import annotations

from typing import TYPE_CHECKING

from nestlink.domain.data_integration import push_demand
from nestlink.domain.model import DemandLine, PartInProcess, TransType
from nestlink.domain.reconciliation import ReconcileStatus
from nestlink.domain.reconciliation.demand import HEAT_NUMBER_MARKER
from tests.helpers.interface import (
    EVENT_ID,
    make_demand_push,
    make_event,
    part_allocation,
    seed,
    staged,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from nestlink.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork

    UowFactory = Callable[[], SqlAlchemyUnitOfWork]


def test_new_demand_stages_single_upsert(routed_unit_of_work: UowFactory) -> None:
    result = push_demand(make_demand_push(), unit_of_work_factory=routed_unit_of_work)

    assert result.status is ReconcileStatus.APPLIED
    assert result.swept is True
    assert result.net_quantity == 10
    entries = staged(routed_unit_of_work)
    assert len(entries) == 1
    entry = entries[0]
    assert entry.trans_type is TransType.DEMAND_UPSERT
    assert entry.district == 1
    assert entry.order_no == "WO-100"
    assert entry.item_name == "J1-PLATE-7"
    assert entry.qty == 10
    assert entry.material == "A36"
    assert entry.mark == "PLATE-7"
    assert entry.heat_number == HEAT_NUMBER_MARKER
    assert entry.event_id == EVENT_ID
    assert entry.event_tag == EVENT_ID
    assert entry.truncated_event_id == EVENT_ID[-10:]
    assert entry.customer == "TX"
    assert entry.dwg_number == "DWG-1"
    assert entry.remark == "CG"
    assert entry.charge_ref == "CR-9"
    assert entry.raw_material_master == "RM-1"


def test_redelivery_leaves_one_upsert_and_no_delete(routed_unit_of_work: UowFactory) -> None:
    seed(routed_unit_of_work, DemandLine(part_name="J1-PLATE-7", work_order="WO-100", quantity=4))

    push_demand(make_demand_push(), unit_of_work_factory=routed_unit_of_work)
    second = push_demand(make_demand_push(), unit_of_work_factory=routed_unit_of_work)

    assert second.swept is False
    assert second.entries_withdrawn == 1
    entries = staged(routed_unit_of_work)
    assert [(entry.trans_type, entry.order_no, entry.qty) for entry in entries] == [
        (TransType.DEMAND_UPSERT, "WO-100", 10)
    ]


def test_netting_subtracts_local_allocations(routed_unit_of_work: UowFactory) -> None:
    seed(routed_unit_of_work, part_allocation(3), part_allocation(4))

    result = push_demand(make_demand_push(quantity=10), unit_of_work_factory=routed_unit_of_work)

    assert result.net_quantity == 3
    [entry] = staged(routed_unit_of_work, TransType.DEMAND_UPSERT)
    assert entry.qty == 3


def test_fully_allocated_demand_stages_nothing(routed_unit_of_work: UowFactory) -> None:
    seed(routed_unit_of_work, part_allocation(3), part_allocation(4))

    result = push_demand(make_demand_push(quantity=7), unit_of_work_factory=routed_unit_of_work)

    assert result.status is ReconcileStatus.NOTHING_TO_PUSH
    assert result.net_quantity == 0
    assert staged(routed_unit_of_work) == []


def test_sweep_removes_lines_source_no_longer_sends(routed_unit_of_work: UowFactory) -> None:
    seed(
        routed_unit_of_work,
        DemandLine(part_name="J1-PLATE-7", work_order="WO-100", quantity=4),
        DemandLine(part_name="J1-PLATE-7", work_order="WO-200", quantity=6),
        DemandLine(part_name="J1-OTHER", work_order="WO-200", quantity=1),
    )

    push_demand(make_demand_push(), unit_of_work_factory=routed_unit_of_work)

    entries = staged(routed_unit_of_work)
    assert [(entry.trans_type, entry.order_no, entry.item_name) for entry in entries] == [
        (TransType.DEMAND_DELETE, "WO-200", "J1-PLATE-7"),
        (TransType.DEMAND_UPSERT, "WO-100", "J1-PLATE-7"),
    ]
    assert entries[0].qty == 0
    assert entries[0].event_tag == EVENT_ID


def test_sweep_keeps_committed_quantity(routed_unit_of_work: UowFactory) -> None:
    seed(
        routed_unit_of_work,
        DemandLine(part_name="J1-PLATE-7", work_order="WO-200", quantity=6, qty_completed=2),
        PartInProcess(part_name="J1-PLATE-7", work_order="WO-200", qty_in_process=1),
        PartInProcess(part_name="J1-PLATE-7", work_order="WO-200", qty_in_process=2),
    )

    push_demand(make_demand_push(), unit_of_work_factory=routed_unit_of_work)

    swept = [entry for entry in staged(routed_unit_of_work) if entry.order_no == "WO-200"]
    assert [(entry.trans_type, entry.qty) for entry in swept] == [(TransType.DEMAND_UPSERT, 5)]


def test_sweep_runs_once_per_event(routed_unit_of_work: UowFactory) -> None:
    seed(
        routed_unit_of_work,
        DemandLine(part_name="J1-PLATE-7", work_order="WO-200", quantity=6),
        DemandLine(part_name="J1-BRACKET", work_order="WO-300", quantity=2),
    )

    first = push_demand(make_demand_push(), unit_of_work_factory=routed_unit_of_work)
    second = push_demand(
        make_demand_push(part_name="J1-BRACKET", work_order="WO-100"),
        unit_of_work_factory=routed_unit_of_work,
    )

    assert (first.swept, second.swept) == (True, False)
    deletes = staged(routed_unit_of_work, TransType.DEMAND_DELETE)
    assert [(entry.order_no, entry.item_name) for entry in deletes] == [("WO-200", "J1-PLATE-7")]


def test_new_event_sweeps_again(routed_unit_of_work: UowFactory) -> None:
    seed(routed_unit_of_work, DemandLine(part_name="J1-PLATE-7", work_order="WO-200"))

    push_demand(make_demand_push(), unit_of_work_factory=routed_unit_of_work)
    later = push_demand(
        make_demand_push(event=make_event("4711000000000000002")),
        unit_of_work_factory=routed_unit_of_work,
    )

    assert later.swept is True
    assert len(staged(routed_unit_of_work, TransType.DEMAND_DELETE)) == 2


def test_lines_tagged_with_current_event_are_not_swept(routed_unit_of_work: UowFactory) -> None:
    seed(
        routed_unit_of_work,
        DemandLine(part_name="J1-PLATE-7", work_order="WO-200", last_event_id=EVENT_ID),
        DemandLine(part_name="J1-PLATE-7", work_order="WO-300", last_event_id="17"),
    )

    push_demand(make_demand_push(), unit_of_work_factory=routed_unit_of_work)

    deletes = staged(routed_unit_of_work, TransType.DEMAND_DELETE)
    assert [entry.order_no for entry in deletes] == ["WO-300"]


def test_mark_falls_back_to_part_name_without_job(routed_unit_of_work: UowFactory) -> None:
    push_demand(
        make_demand_push(part_name="PLATE-7", job=None), unit_of_work_factory=routed_unit_of_work
    )

    [entry] = staged(routed_unit_of_work)
    assert entry.mark == "PLATE-7"


def test_explicit_mark_wins(routed_unit_of_work: UowFactory) -> None:
    push_demand(make_demand_push(mark="M-1"), unit_of_work_factory=routed_unit_of_work)

    [entry] = staged(routed_unit_of_work)
    assert entry.mark == "M-1"


def test_unrouted_system_is_reported_and_stages_nothing(
    routed_unit_of_work: UowFactory,
) -> None:
    seed(routed_unit_of_work, DemandLine(part_name="J1-PLATE-7", work_order="WO-200"))

    result = push_demand(
        make_demand_push(event=make_event(system="QAS")), unit_of_work_factory=routed_unit_of_work
    )

    assert result.status is ReconcileStatus.ROUTE_NOT_FOUND
    assert result.is_lookup_miss is True
    assert staged(routed_unit_of_work) == []
