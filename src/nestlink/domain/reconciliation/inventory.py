"""Inventory reconciliation: keep Target's stock sheets and remnants in step with Source."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from nestlink.domain.model import StagingEntry, TransType

from .contracts import Operation, ReconcileResult, ReconcileStatus
from .ledger import net_inventory_quantity
from .routing import remnant_geometry_path, resolve_route
from .sweep import sweep

if TYPE_CHECKING:
    from nestlink.domain.model import InterfaceConfig, InventoryLine, SourceEvent
    from nestlink.domain.ports import InterfaceRepositories

    from .contracts import InventoryPush

log = getLogger(__name__)


def reconcile_inventory(
    push: InventoryPush, repositories: InterfaceRepositories
) -> ReconcileResult:
    """Stage the entries that bring one sheet in Target to Source's quantity."""

    event = push.event
    route = resolve_route(repositories.configs, event)
    if route is None:
        return ReconcileResult(
            operation=Operation.INVENTORY, event=event, status=ReconcileStatus.ROUTE_NOT_FOUND
        )

    inventory = repositories.inventory
    outcome = sweep(
        repositories.staging,
        event,
        candidates=lambda: inventory.by_material_master(push.material_master),
        last_seen=lambda line: line.last_event_id,
        removal=lambda line: _removal_entry(line, route=route, event=event),
    )

    net = net_inventory_quantity(
        repositories.allocations,
        sheet_name=push.sheet_name,
        quantity=push.quantity,
    )
    if net <= 0:
        log.info("No stock to push for sheet %s (net %s, event %s)", push.sheet_name, net, event)
        return ReconcileResult(
            operation=Operation.INVENTORY,
            event=event,
            status=ReconcileStatus.NOTHING_TO_PUSH,
            swept=outcome.executed,
            entries_written=len(outcome.entries),
            net_quantity=net,
        )

    withdrawn = repositories.staging.withdraw_stock(push.sheet_name)
    entry = _upsert_entry(push, route=route, quantity=net)
    repositories.staging.add(entry)
    log.info(
        "Staged %s sheet %s qty=%s (event %s, withdrew %d)",
        push.sheet_type,
        push.sheet_name,
        net,
        event,
        withdrawn,
    )
    return ReconcileResult(
        operation=Operation.INVENTORY,
        event=event,
        status=ReconcileStatus.APPLIED,
        swept=outcome.executed,
        entries_written=len(outcome.entries) + 1,
        entries_withdrawn=withdrawn,
        net_quantity=net,
    )


def _removal_entry(
    line: InventoryLine, *, route: InterfaceConfig, event: SourceEvent
) -> StagingEntry:
    # a zero-quantity stock upsert removes the sheet; Target requires the dimensions
    return StagingEntry(
        trans_type=TransType.STANDARD_STOCK_UPSERT,
        district=route.district,
        event_id=event.event_id,
        truncated_event_id=event.truncated_id,
        item_name=line.sheet_name,
        qty=0,
        material=line.material,
        thickness=line.thickness,
        width=line.width,
        length=line.length,
    )


def _upsert_entry(push: InventoryPush, *, route: InterfaceConfig, quantity: int) -> StagingEntry:
    event = push.event
    if push.is_remnant:
        trans_type = TransType.REMNANT_UPSERT
        file_name = remnant_geometry_path(route, push.sheet_name)
    else:
        trans_type = TransType.STANDARD_STOCK_UPSERT
        file_name = None
    return StagingEntry(
        trans_type=trans_type,
        district=route.district,
        event_id=event.event_id,
        truncated_event_id=event.truncated_id,
        item_name=push.sheet_name,
        qty=quantity,
        material=push.material,
        thickness=push.thickness,
        width=push.width,
        length=push.length,
        prime_code=push.material_master,
        event_tag=event.event_id,
        note1=push.note(0),
        note2=push.note(1),
        note3=push.note(2),
        note4=push.note(3),
        file_name=file_name,
    )
