"""Netting of Source quantities against the local slab allocation ledger."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nestlink.domain.ports import AllocationRepository

log = getLogger(__name__)


def net_demand_quantity(
    allocations: AllocationRepository,
    *,
    part_name: str,
    work_order: str,
    quantity: int,
) -> int:
    """Subtract the quantity slabs already consume for this part on this work order."""

    allocated = sum(
        allocation.quantity
        for allocation in allocations.part_allocations(part_name=part_name, work_order=work_order)
    )
    if allocated:
        log.debug("Netting %s/%s: %s - %s allocated", work_order, part_name, quantity, allocated)
    return quantity - allocated


def net_inventory_quantity(
    allocations: AllocationRepository,
    *,
    sheet_name: str,
    quantity: int,
) -> int:
    """Subtract one unit per slab placement of this sheet."""

    allocated = len(allocations.sheet_allocations(sheet_name))
    if allocated:
        log.debug("Netting sheet %s: %s - %s allocated", sheet_name, quantity, allocated)
    return quantity - allocated
