"""Inbound requests and structured outcomes for reconciliation calls.

Every inbound operation is fire-and-forget from Source's point of view. The result still
reports what happened so lookup misses are observable without changing the no-op
behaviour.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from nestlink.domain.model import SheetType

if TYPE_CHECKING:
    from nestlink.domain.model import SourceEvent


class Operation(StrEnum):
    DEMAND = "demand"
    INVENTORY = "inventory"
    PROGRAM_UPDATE = "program_update"


class ReconcileStatus(StrEnum):
    """Outcome of one reconciliation call."""

    APPLIED = "applied"
    NOTHING_TO_PUSH = "nothing_to_push"
    ROUTE_NOT_FOUND = "route_not_found"
    PROGRAM_NOT_FOUND = "program_not_found"


@dataclass(slots=True, kw_only=True)
class DemandPush:
    """Source's desired quantity of a part on a work order."""

    event: SourceEvent
    work_order: str
    part_name: str
    quantity: int
    material: str
    state: str | None = None
    dwg: str | None = None
    codegen: str | None = None
    job: str | None = None
    shipment: str | None = None
    charge_ref: str | None = None
    op1: str | None = None
    op2: str | None = None
    op3: str | None = None
    mark: str | None = None
    raw_material_master: str | None = None

    def resolved_mark(self) -> str:
        """Part name with the ``<job>-`` prefix stripped, unless Source supplied one."""

        if self.mark is not None:
            return self.mark
        if self.job:
            return self.part_name.removeprefix(f"{self.job}-")
        return self.part_name


@dataclass(slots=True, kw_only=True)
class InventoryPush:
    """Source's available quantity of a stock sheet or remnant."""

    event: SourceEvent
    sheet_name: str
    sheet_type: SheetType
    quantity: int
    material: str
    thickness: float
    width: float
    length: float
    material_master: str
    notes: tuple[str | None, ...] = field(default_factory=tuple)

    @property
    def is_remnant(self) -> bool:
        return self.sheet_type is SheetType.REMNANT

    def note(self, index: int) -> str | None:
        return self.notes[index] if index < len(self.notes) else None


@dataclass(slots=True, kw_only=True)
class ProgramUpdatePush:
    """Instruction to accept an externally approved program revision."""

    event: SourceEvent
    archive_packet_id: int


@dataclass(slots=True, kw_only=True)
class ReconcileResult:
    operation: Operation
    event: SourceEvent
    status: ReconcileStatus
    swept: bool = False
    entries_written: int = 0
    entries_withdrawn: int = 0
    net_quantity: int | None = None

    @property
    def is_lookup_miss(self) -> bool:
        return self.status in (ReconcileStatus.ROUTE_NOT_FOUND, ReconcileStatus.PROGRAM_NOT_FOUND)
