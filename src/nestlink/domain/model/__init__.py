"""Domain model for the Source/Target interface."""

from __future__ import annotations

from .allocation import PartAllocation, SheetAllocation
from .archive import AuxiliaryArchiveRecord, PartArchiveRecord, ProgramArchiveRecord
from .enums import ArchiveCategory, ArchiveOperation, FeedbackStatus, SheetType, TransType
from .events import InvalidSourceEventError, SourceEvent
from .routing import SHEET_NAME_PLACEHOLDER, InterfaceConfig
from .staging import StagingEntry
from .target import DemandLine, InventoryLine, PartInProcess, Program, Remnant, SheetInProgram

__all__ = [
    "SHEET_NAME_PLACEHOLDER",
    "ArchiveCategory",
    "ArchiveOperation",
    "AuxiliaryArchiveRecord",
    "DemandLine",
    "FeedbackStatus",
    "InterfaceConfig",
    "InvalidSourceEventError",
    "InventoryLine",
    "PartAllocation",
    "PartArchiveRecord",
    "PartInProcess",
    "Program",
    "ProgramArchiveRecord",
    "Remnant",
    "SheetAllocation",
    "SheetInProgram",
    "SheetType",
    "SourceEvent",
    "StagingEntry",
    "TransType",
]
