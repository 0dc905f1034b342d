"""Read-side mirrors of the records Target already holds.

The reconciliation engine never writes these; Target updates them when the transfer
process drains staging entries or when a program is posted.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False, kw_only=True)
class DemandLine:
    """A part on a work order as currently known to Target."""

    part_name: str
    work_order: str
    quantity: int = 0
    qty_completed: int = 0
    material: str | None = None
    job: str | None = None
    shipment: str | None = None
    # tag of the Source event that last touched this line
    last_event_id: str | None = None
    id: int | None = None


@dataclass(eq=False, kw_only=True)
class PartInProcess:
    part_name: str
    work_order: str
    qty_in_process: int = 0
    program_name: str | None = None
    repeat_id: int | None = None
    id: int | None = None


@dataclass(eq=False, kw_only=True)
class InventoryLine:
    """A stock sheet or remnant as currently known to Target."""

    sheet_name: str
    material_master: str | None = None
    quantity: int = 0
    material: str | None = None
    thickness: float | None = None
    width: float | None = None
    length: float | None = None
    last_event_id: str | None = None
    id: int | None = None


@dataclass(eq=False, kw_only=True)
class Program:
    program_name: str
    repeat_id: int
    archive_packet_id: int | None = None
    machine_name: str | None = None
    cutting_time: float | None = None
    id: int | None = None


@dataclass(eq=False, kw_only=True)
class SheetInProgram:
    program_name: str
    repeat_id: int
    sheet_name: str
    id: int | None = None


@dataclass(eq=False, kw_only=True)
class Remnant:
    remnant_name: str
    program_name: str
    repeat_id: int
    area: float | None = None
    id: int | None = None
