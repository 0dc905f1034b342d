"""Demand reconciliation: keep Target's work-order part lines in step with Source."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Final

from nestlink.domain.model import StagingEntry, TransType

from .contracts import Operation, ReconcileResult, ReconcileStatus
from .ledger import net_demand_quantity
from .routing import resolve_route
from .sweep import sweep

if TYPE_CHECKING:
    from nestlink.domain.model import DemandLine, InterfaceConfig, SourceEvent
    from nestlink.domain.ports import DemandLineRepository, InterfaceRepositories

    from .contracts import DemandPush

# Target reads this marker to require a heat number on the nested part
HEAT_NUMBER_MARKER: Final[str] = "HighHeatNum"

log = getLogger(__name__)


def reconcile_demand(push: DemandPush, repositories: InterfaceRepositories) -> ReconcileResult:
    """Stage the entries that bring one demand line in Target to Source's quantity."""

    event = push.event
    route = resolve_route(repositories.configs, event)
    if route is None:
        return ReconcileResult(
            operation=Operation.DEMAND, event=event, status=ReconcileStatus.ROUTE_NOT_FOUND
        )

    demand = repositories.demand
    outcome = sweep(
        repositories.staging,
        event,
        candidates=lambda: demand.by_part_name(push.part_name),
        last_seen=lambda line: line.last_event_id,
        removal=lambda line: _committed_entry(line, demand, route=route, event=event),
    )

    net = net_demand_quantity(
        repositories.allocations,
        part_name=push.part_name,
        work_order=push.work_order,
        quantity=push.quantity,
    )
    if net <= 0:
        # removal, if any, is already covered by the sweep
        log.info(
            "No demand to push for %s/%s (net %s, event %s)",
            push.work_order,
            push.part_name,
            net,
            event,
        )
        return ReconcileResult(
            operation=Operation.DEMAND,
            event=event,
            status=ReconcileStatus.NOTHING_TO_PUSH,
            swept=outcome.executed,
            entries_written=len(outcome.entries),
            net_quantity=net,
        )

    withdrawn = repositories.staging.withdraw_demand(
        work_order=push.work_order,
        part_name=push.part_name,
        event_id=event.event_id,
    )
    repositories.staging.add(_upsert_entry(push, route=route, quantity=net))
    log.info(
        "Staged demand %s/%s qty=%s (event %s, withdrew %d)",
        push.work_order,
        push.part_name,
        net,
        event,
        withdrawn,
    )
    return ReconcileResult(
        operation=Operation.DEMAND,
        event=event,
        status=ReconcileStatus.APPLIED,
        swept=outcome.executed,
        entries_written=len(outcome.entries) + 1,
        entries_withdrawn=withdrawn,
        net_quantity=net,
    )


def committed_quantity(line: DemandLine, demand: DemandLineRepository) -> int:
    """Quantity Target can no longer give back: completed plus in process."""

    in_process = demand.in_process_quantity(part_name=line.part_name, work_order=line.work_order)
    return line.qty_completed + in_process


def _committed_entry(
    line: DemandLine,
    demand: DemandLineRepository,
    *,
    route: InterfaceConfig,
    event: SourceEvent,
) -> StagingEntry:
    committed = committed_quantity(line, demand)
    trans_type = TransType.DEMAND_DELETE if committed == 0 else TransType.DEMAND_UPSERT
    return StagingEntry(
        trans_type=trans_type,
        district=route.district,
        event_id=event.event_id,
        truncated_event_id=event.truncated_id,
        order_no=line.work_order,
        item_name=line.part_name,
        qty=committed,
        event_tag=event.event_id,
    )


def _upsert_entry(push: DemandPush, *, route: InterfaceConfig, quantity: int) -> StagingEntry:
    event = push.event
    return StagingEntry(
        trans_type=TransType.DEMAND_UPSERT,
        district=route.district,
        event_id=event.event_id,
        truncated_event_id=event.truncated_id,
        order_no=push.work_order,
        item_name=push.part_name,
        qty=quantity,
        material=push.material,
        customer=push.state,
        dwg_number=push.dwg,
        remark=push.codegen,
        job=push.job,
        shipment=push.shipment,
        charge_ref=push.charge_ref,
        op1=push.op1,
        op2=push.op2,
        op3=push.op3,
        mark=push.resolved_mark(),
        raw_material_master=push.raw_material_master,
        heat_number=HEAT_NUMBER_MARKER,
        event_tag=event.event_id,
    )
