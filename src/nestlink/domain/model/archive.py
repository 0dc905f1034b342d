"""Result records Target archives after executing programs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .enums import ArchiveCategory


@dataclass(eq=False, kw_only=True)
class ProgramArchiveRecord:
    archive_packet_id: int
    trans_type: str
    program_name: str
    repeat_id: int | None = None
    machine_name: str | None = None
    cutting_time: float | None = None
    id: int | None = None


@dataclass(eq=False, kw_only=True)
class PartArchiveRecord:
    """Per-part processed quantity recorded for a program execution."""

    archive_packet_id: int
    trans_type: str
    part_name: str
    work_order: str
    sheet_name: str | None = None
    qty_in_process: int = 0
    true_area: float | None = None
    nested_area: float | None = None
    id: int | None = None


@dataclass(eq=False, kw_only=True)
class AuxiliaryArchiveRecord:
    """Archive rows nothing reads yet (parts, remnants, sheets, work orders)."""

    category: ArchiveCategory
    archive_packet_id: int
    trans_type: str
    item_name: str | None = None
    id: int | None = None
