"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class TransType(StrEnum):
    """Operation codes understood by the transfer process draining the staging log."""

    DEMAND_UPSERT = "SN81"
    DEMAND_DELETE = "SN82"
    STANDARD_STOCK_UPSERT = "SN91A"
    REMNANT_UPSERT = "SN97"
    PROGRAM_REVISION_ACCEPT = "SN76"


class SheetType(StrEnum):
    STANDARD = "Standard"
    REMNANT = "Remnant"

    @classmethod
    def parse(cls, value: str | None) -> SheetType:
        """Anything Source does not label as a remnant is normal stock."""
        if value is not None and value.strip() == cls.REMNANT.value:
            return cls.REMNANT
        return cls.STANDARD


class ArchiveCategory(StrEnum):
    PROGRAM = "program"
    PART_IN_PROCESS = "part_in_process"
    PART = "part"
    REMNANT = "remnant"
    SHEET = "sheet"
    WORK_ORDER = "work_order"


class ArchiveOperation(StrEnum):
    """Archive operation codes the feedback channel recognises."""

    PROGRAM_POST = "SN100"
    PROGRAM_DELETE = "SN101"


class FeedbackStatus(StrEnum):
    CREATED = "Created"
    DELETED = "Deleted"

    @classmethod
    def from_operation(cls, operation: str) -> FeedbackStatus | None:
        if operation == ArchiveOperation.PROGRAM_POST:
            return cls.CREATED
        if operation == ArchiveOperation.PROGRAM_DELETE:
            return cls.DELETED
        return None
