"""Public interface for the Source payload adapter."""

from __future__ import annotations

from .schema import (
    DemandPayload,
    DemandPayloadInput,
    InventoryPayload,
    InventoryPayloadInput,
    ProgramUpdatePayload,
    ProgramUpdatePayloadInput,
)
from .translator import parse_demand_push, parse_inventory_push, parse_program_update_push

__all__ = [
    "DemandPayload",
    "DemandPayloadInput",
    "InventoryPayload",
    "InventoryPayloadInput",
    "ProgramUpdatePayload",
    "ProgramUpdatePayloadInput",
    "parse_demand_push",
    "parse_inventory_push",
    "parse_program_update_push",
]
