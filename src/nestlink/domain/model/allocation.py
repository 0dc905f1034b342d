"""Local slab allocations consumed before Target ever sees a quantity."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False, kw_only=True)
class PartAllocation:
    slab_id: int
    part_name: str
    work_order: str
    quantity: int
    id: int | None = None


@dataclass(eq=False, kw_only=True)
class SheetAllocation:
    """One sheet placed on a slab; each row consumes one unit of the sheet."""

    slab_id: int
    sheet_index: int
    sheet_name: str
    x_position: float | None = None
    y_position: float | None = None
    rotation: float | None = None
    width: float | None = None
    length: float | None = None
    id: int | None = None
