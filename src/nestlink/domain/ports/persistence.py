"""Ports for the stores the reconciliation engine reads and writes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from nestlink.domain.model import (
    AuxiliaryArchiveRecord,
    DemandLine,
    InterfaceConfig,
    InventoryLine,
    PartAllocation,
    PartArchiveRecord,
    Program,
    ProgramArchiveRecord,
    SheetAllocation,
    StagingEntry,
)

if TYPE_CHECKING:
    from collections.abc import Collection, Sequence

    from nestlink.domain.model import ArchiveCategory, Remnant, SheetInProgram


@runtime_checkable
class Repository[TEntity](Protocol):
    """Minimal repository contract for a persistent store."""

    def add(self, entity: TEntity) -> None: ...


@runtime_checkable
class InterfaceConfigRepository(Repository[InterfaceConfig], Protocol):
    """Routing configuration per Source system."""

    def get(self, system: str) -> InterfaceConfig | None: ...


@runtime_checkable
class AllocationRepository(Repository[PartAllocation | SheetAllocation], Protocol):
    """Read access to the local slab allocation ledger."""

    def part_allocations(self, *, part_name: str, work_order: str) -> Sequence[PartAllocation]: ...

    def sheet_allocations(self, sheet_name: str) -> Sequence[SheetAllocation]: ...


@runtime_checkable
class DemandLineRepository(Repository[DemandLine], Protocol):
    """Demand lines Target currently holds."""

    def by_part_name(self, part_name: str) -> Sequence[DemandLine]: ...

    def get(self, *, part_name: str, work_order: str) -> DemandLine | None: ...

    def in_process_quantity(self, *, part_name: str, work_order: str) -> int: ...


@runtime_checkable
class InventoryLineRepository(Repository[InventoryLine], Protocol):
    """Stock sheets and remnants Target currently holds."""

    def by_material_master(self, material_master: str) -> Sequence[InventoryLine]: ...

    def get(self, sheet_name: str) -> InventoryLine | None: ...


@runtime_checkable
class ProgramRepository(Repository[Program], Protocol):
    """Programs Target has nested, with the sheets and remnants they touch."""

    def by_archive_packet(self, archive_packet_id: int) -> Sequence[Program]: ...

    def sheets_for(self, *, program_name: str, repeat_id: int) -> Sequence[SheetInProgram]: ...

    def remnants_for(self, *, program_name: str, repeat_id: int) -> Sequence[Remnant]: ...


@runtime_checkable
class StagingRepository(Repository[StagingEntry], Protocol):
    """The staging log (outbox) shared with the transfer process."""

    def has_event(self, event_id: str) -> bool: ...

    def withdraw_demand(self, *, work_order: str, part_name: str, event_id: str) -> int:
        """Delete queued entries for one demand line staged under ``event_id``."""
        ...

    def withdraw_stock(self, sheet_name: str) -> int:
        """Delete every queued stock entry for ``sheet_name``."""
        ...

    def pending(self) -> Sequence[StagingEntry]:
        """Return queued entries in drain order."""
        ...


@runtime_checkable
class ArchiveRepository(
    Repository[ProgramArchiveRecord | PartArchiveRecord | AuxiliaryArchiveRecord], Protocol
):
    """Archive tables Target writes after executing programs."""

    def program_records(
        self, operations: Collection[str] | None = None
    ) -> Sequence[ProgramArchiveRecord]: ...

    def part_records(
        self, operations: Collection[str] | None = None
    ) -> Sequence[PartArchiveRecord]: ...

    def purge(self, category: ArchiveCategory, *, keep: Collection[str] | None = None) -> int:
        """Delete records in ``category`` whose operation is not in ``keep`` (all if None)."""
        ...

    def remove_program_record(self, record_id: int) -> bool: ...

    def remove_part_record(self, record_id: int) -> bool: ...
