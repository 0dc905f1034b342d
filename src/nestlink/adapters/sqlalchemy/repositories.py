"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import delete, exists, func, select

from nestlink.adapters.sqlalchemy.mappings import (
    auxiliary_archive_table,
    demand_line_table,
    inventory_line_table,
    part_allocation_table,
    part_archive_table,
    part_in_process_table,
    program_archive_table,
    program_table,
    remnant_table,
    sheet_allocation_table,
    sheet_in_program_table,
    staging_entry_table,
)
from nestlink.domain.model import (
    ArchiveCategory,
    AuxiliaryArchiveRecord,
    DemandLine,
    InterfaceConfig,
    InventoryLine,
    PartAllocation,
    PartArchiveRecord,
    PartInProcess,
    Program,
    ProgramArchiveRecord,
    Remnant,
    SheetAllocation,
    SheetInProgram,
    StagingEntry,
    TransType,
)

if TYPE_CHECKING:
    from collections.abc import Collection, Sequence

    from sqlalchemy import Select
    from sqlalchemy.orm import Session

STOCK_TRANS_TYPES = (TransType.STANDARD_STOCK_UPSERT, TransType.REMNANT_UPSERT)


class SqlAlchemyInterfaceConfigRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: InterfaceConfig) -> None:
        self.session.add(entity)

    def get(self, system: str) -> InterfaceConfig | None:
        return self.session.get(InterfaceConfig, system)


class SqlAlchemyAllocationRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: PartAllocation | SheetAllocation) -> None:
        self.session.add(entity)

    def part_allocations(self, *, part_name: str, work_order: str) -> Sequence[PartAllocation]:
        stmt = (
            select(PartAllocation)
            .where(part_allocation_table.c.part_name == part_name)
            .where(part_allocation_table.c.work_order == work_order)
        )
        return self.session.execute(stmt).scalars().all()

    def sheet_allocations(self, sheet_name: str) -> Sequence[SheetAllocation]:
        stmt = select(SheetAllocation).where(sheet_allocation_table.c.sheet_name == sheet_name)
        return self.session.execute(stmt).scalars().all()


class SqlAlchemyDemandLineRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: DemandLine | PartInProcess) -> None:
        self.session.add(entity)

    def by_part_name(self, part_name: str) -> Sequence[DemandLine]:
        stmt = (
            select(DemandLine)
            .where(demand_line_table.c.part_name == part_name)
            .order_by(demand_line_table.c.id)
        )
        return self.session.execute(stmt).scalars().all()

    def get(self, *, part_name: str, work_order: str) -> DemandLine | None:
        stmt = (
            select(DemandLine)
            .where(demand_line_table.c.part_name == part_name)
            .where(demand_line_table.c.work_order == work_order)
            .order_by(demand_line_table.c.id)
            .limit(1)
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def in_process_quantity(self, *, part_name: str, work_order: str) -> int:
        stmt = (
            select(func.coalesce(func.sum(part_in_process_table.c.qty_in_process), 0))
            .where(part_in_process_table.c.part_name == part_name)
            .where(part_in_process_table.c.work_order == work_order)
        )
        return int(self.session.execute(stmt).scalar_one())


class SqlAlchemyInventoryLineRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: InventoryLine) -> None:
        self.session.add(entity)

    def by_material_master(self, material_master: str) -> Sequence[InventoryLine]:
        stmt = (
            select(InventoryLine)
            .where(inventory_line_table.c.material_master == material_master)
            .order_by(inventory_line_table.c.id)
        )
        return self.session.execute(stmt).scalars().all()

    def get(self, sheet_name: str) -> InventoryLine | None:
        stmt = (
            select(InventoryLine)
            .where(inventory_line_table.c.sheet_name == sheet_name)
            .order_by(inventory_line_table.c.id)
            .limit(1)
        )
        return self.session.execute(stmt).scalar_one_or_none()


class SqlAlchemyProgramRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: Program | SheetInProgram | Remnant) -> None:
        self.session.add(entity)

    def by_archive_packet(self, archive_packet_id: int) -> Sequence[Program]:
        stmt = (
            select(Program)
            .where(program_table.c.archive_packet_id == archive_packet_id)
            .order_by(program_table.c.id)
        )
        return self.session.execute(stmt).scalars().all()

    def sheets_for(self, *, program_name: str, repeat_id: int) -> Sequence[SheetInProgram]:
        stmt = (
            select(SheetInProgram)
            .where(sheet_in_program_table.c.program_name == program_name)
            .where(sheet_in_program_table.c.repeat_id == repeat_id)
            .order_by(sheet_in_program_table.c.id)
        )
        return self.session.execute(stmt).scalars().all()

    def remnants_for(self, *, program_name: str, repeat_id: int) -> Sequence[Remnant]:
        stmt = (
            select(Remnant)
            .where(remnant_table.c.program_name == program_name)
            .where(remnant_table.c.repeat_id == repeat_id)
            .order_by(remnant_table.c.id)
        )
        return self.session.execute(stmt).scalars().all()


class SqlAlchemyStagingRepository:
    """Staging log access; deletes only ever touch entries not yet drained."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: StagingEntry) -> None:
        self.session.add(entity)

    def has_event(self, event_id: str) -> bool:
        stmt = select(exists().where(staging_entry_table.c.event_id == event_id))
        return bool(self.session.execute(stmt).scalar())

    def withdraw_demand(self, *, work_order: str, part_name: str, event_id: str) -> int:
        stmt = (
            select(StagingEntry)
            .where(staging_entry_table.c.order_no == work_order)
            .where(staging_entry_table.c.item_name == part_name)
            .where(staging_entry_table.c.event_id == event_id)
        )
        return self._delete_matching(stmt)

    def withdraw_stock(self, sheet_name: str) -> int:
        stmt = (
            select(StagingEntry)
            .where(staging_entry_table.c.item_name == sheet_name)
            .where(staging_entry_table.c.trans_type.in_(STOCK_TRANS_TYPES))
        )
        return self._delete_matching(stmt)

    def pending(self) -> Sequence[StagingEntry]:
        stmt = select(StagingEntry).order_by(staging_entry_table.c.id)
        return self.session.execute(stmt).scalars().all()

    def _delete_matching(self, stmt: Select[tuple[StagingEntry]]) -> int:
        # the select autoflushes entries staged earlier in this unit of work
        entries = self.session.execute(stmt).scalars().all()
        for entry in entries:
            self.session.delete(entry)
        return len(entries)


_ARCHIVE_OPERATION_COLUMNS = {
    ArchiveCategory.PROGRAM: program_archive_table.c.trans_type,
    ArchiveCategory.PART_IN_PROCESS: part_archive_table.c.trans_type,
}


class SqlAlchemyArchiveRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(
        self, entity: ProgramArchiveRecord | PartArchiveRecord | AuxiliaryArchiveRecord
    ) -> None:
        self.session.add(entity)

    def program_records(
        self, operations: Collection[str] | None = None
    ) -> Sequence[ProgramArchiveRecord]:
        stmt = select(ProgramArchiveRecord).order_by(program_archive_table.c.id)
        if operations is not None:
            codes = [str(op) for op in operations]
            stmt = stmt.where(program_archive_table.c.trans_type.in_(codes))
        return self.session.execute(stmt).scalars().all()

    def part_records(
        self, operations: Collection[str] | None = None
    ) -> Sequence[PartArchiveRecord]:
        stmt = select(PartArchiveRecord).order_by(part_archive_table.c.id)
        if operations is not None:
            codes = [str(op) for op in operations]
            stmt = stmt.where(part_archive_table.c.trans_type.in_(codes))
        return self.session.execute(stmt).scalars().all()

    def purge(self, category: ArchiveCategory, *, keep: Collection[str] | None = None) -> int:
        if category is ArchiveCategory.PROGRAM:
            stmt = delete(ProgramArchiveRecord)
        elif category is ArchiveCategory.PART_IN_PROCESS:
            stmt = delete(PartArchiveRecord)
        else:
            stmt = delete(AuxiliaryArchiveRecord).where(
                auxiliary_archive_table.c.category == category
            )
        if keep is not None:
            column = _ARCHIVE_OPERATION_COLUMNS.get(category, auxiliary_archive_table.c.trans_type)
            stmt = stmt.where(column.not_in([str(op) for op in keep]))
        self.session.flush()
        result = self.session.execute(stmt.execution_options(synchronize_session=False))
        return int(result.rowcount or 0)  # pyright: ignore[reportAttributeAccessIssue]

    def remove_program_record(self, record_id: int) -> bool:
        record = self.session.get(ProgramArchiveRecord, record_id)
        if record is None:
            return False
        self.session.delete(record)
        return True

    def remove_part_record(self, record_id: int) -> bool:
        record = self.session.get(PartArchiveRecord, record_id)
        if record is None:
            return False
        self.session.delete(record)
        return True


if TYPE_CHECKING:
    from typing import cast

    from nestlink.domain.ports.persistence import (
        AllocationRepository,
        ArchiveRepository,
        DemandLineRepository,
        InterfaceConfigRepository,
        InventoryLineRepository,
        ProgramRepository,
        StagingRepository,
    )

    _session_stub = cast("Session", object())
    _config_repo: InterfaceConfigRepository = SqlAlchemyInterfaceConfigRepository(_session_stub)
    _allocation_repo: AllocationRepository = SqlAlchemyAllocationRepository(_session_stub)
    _demand_repo: DemandLineRepository = SqlAlchemyDemandLineRepository(_session_stub)
    _inventory_repo: InventoryLineRepository = SqlAlchemyInventoryLineRepository(_session_stub)
    _program_repo: ProgramRepository = SqlAlchemyProgramRepository(_session_stub)
    _staging_repo: StagingRepository = SqlAlchemyStagingRepository(_session_stub)
    _archive_repo: ArchiveRepository = SqlAlchemyArchiveRepository(_session_stub)
