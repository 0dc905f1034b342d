"""Reconciliation core: decide which staging entries each inbound Source call writes.

Flow per call:
1) resolve the Source system's route (district, remnant template)
2) run the once-per-event removal sweep
3) net the Source quantity against local slab allocations
4) withdraw stale queued entries and stage one authoritative upsert
"""

from __future__ import annotations

from .contracts import (
    DemandPush,
    InventoryPush,
    Operation,
    ProgramUpdatePush,
    ReconcileResult,
    ReconcileStatus,
)
from .demand import reconcile_demand
from .inventory import reconcile_inventory
from .program import reconcile_program_update

__all__ = [
    "DemandPush",
    "InventoryPush",
    "Operation",
    "ProgramUpdatePush",
    "ReconcileResult",
    "ReconcileStatus",
    "reconcile_demand",
    "reconcile_inventory",
    "reconcile_program_update",
]
