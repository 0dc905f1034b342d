"""SQLAlchemy mapping metadata for the interface domain model."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from enum import StrEnum
from functools import cache
from typing import TYPE_CHECKING, Final

from sqlalchemy import (
    Column,
    DateTime,
    Dialect,
    Enum,
    Float,
    Index,
    Integer,
    String,
    Table,
    TypeDecorator,
    orm,
)
from sqlalchemy.orm import configure_mappers

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
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

NAME_LENGTH: Final[int] = 50
EVENT_ID_LENGTH: Final[int] = 50
TRUNCATED_ID_LENGTH: Final[int] = 10


def _enum_values(enum_cls: type[StrEnum]) -> list[str]:
    return [member.value for member in enum_cls]


class UTCDateTime(TypeDecorator[datetime]):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        return value if value.tzinfo else value.replace(tzinfo=UTC)


mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# Configuration and local ledger -------------------------------------------------

interface_config_table = Table(
    "interface_config",
    mapper_registry.metadata,
    Column("system", String(3), primary_key=True),
    Column("district", Integer, nullable=False),
    Column("remnant_template", String(255), nullable=True),
)

part_allocation_table = Table(
    "slab_part_allocation",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("slab_id", Integer, nullable=False),
    Column("part_name", String(100), nullable=False),
    Column("work_order", String(NAME_LENGTH), nullable=False),
    Column("quantity", Integer, nullable=False),
    Index("ix_slab_part_allocation_part", "part_name", "work_order"),
)

sheet_allocation_table = Table(
    "slab_sheet_allocation",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("slab_id", Integer, nullable=False),
    Column("sheet_index", Integer, nullable=False),
    Column("sheet_name", String(NAME_LENGTH), nullable=False, index=True),
    Column("x_position", Float, nullable=True),
    Column("y_position", Float, nullable=True),
    Column("rotation", Float, nullable=True),
    Column("width", Float, nullable=True),
    Column("length", Float, nullable=True),
)

# Target mirrors ------------------------------------------------------------------

demand_line_table = Table(
    "demand_line",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("part_name", String(100), nullable=False),
    Column("work_order", String(NAME_LENGTH), nullable=False),
    Column("quantity", Integer, nullable=False, default=0),
    Column("qty_completed", Integer, nullable=False, default=0),
    Column("material", String(NAME_LENGTH), nullable=True),
    Column("job", String(NAME_LENGTH), nullable=True),
    Column("shipment", String(NAME_LENGTH), nullable=True),
    Column("last_event_id", String(EVENT_ID_LENGTH), nullable=True),
    Index("ix_demand_line_part", "part_name", "work_order"),
)

part_in_process_table = Table(
    "part_in_process",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("part_name", String(100), nullable=False),
    Column("work_order", String(NAME_LENGTH), nullable=False),
    Column("qty_in_process", Integer, nullable=False, default=0),
    Column("program_name", String(NAME_LENGTH), nullable=True),
    Column("repeat_id", Integer, nullable=True),
    Index("ix_part_in_process_part", "part_name", "work_order"),
)

inventory_line_table = Table(
    "inventory_line",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("sheet_name", String(NAME_LENGTH), nullable=False, index=True),
    Column("material_master", String(NAME_LENGTH), nullable=True, index=True),
    Column("quantity", Integer, nullable=False, default=0),
    Column("material", String(NAME_LENGTH), nullable=True),
    Column("thickness", Float, nullable=True),
    Column("width", Float, nullable=True),
    Column("length", Float, nullable=True),
    Column("last_event_id", String(EVENT_ID_LENGTH), nullable=True),
)

program_table = Table(
    "program",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("program_name", String(NAME_LENGTH), nullable=False),
    Column("repeat_id", Integer, nullable=False),
    Column("archive_packet_id", Integer, nullable=True, index=True),
    Column("machine_name", String(NAME_LENGTH), nullable=True),
    Column("cutting_time", Float, nullable=True),
)

sheet_in_program_table = Table(
    "sheet_in_program",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("program_name", String(NAME_LENGTH), nullable=False),
    Column("repeat_id", Integer, nullable=False),
    Column("sheet_name", String(NAME_LENGTH), nullable=False),
    Index("ix_sheet_in_program_program", "program_name", "repeat_id"),
)

remnant_table = Table(
    "remnant",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("remnant_name", String(NAME_LENGTH), nullable=False),
    Column("program_name", String(NAME_LENGTH), nullable=False),
    Column("repeat_id", Integer, nullable=False),
    Column("area", Float, nullable=True),
    Index("ix_remnant_program", "program_name", "repeat_id"),
)

# Staging log (outbox) ------------------------------------------------------------

staging_entry_table = Table(
    "staging_entry",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "trans_type",
        Enum(TransType, native_enum=False, values_callable=_enum_values),
        nullable=False,
    ),
    Column("district", Integer, nullable=False),
    Column("event_id", String(EVENT_ID_LENGTH), nullable=False, index=True),
    Column("truncated_event_id", String(TRUNCATED_ID_LENGTH), nullable=False),
    Column("order_no", String(NAME_LENGTH), nullable=True),
    Column("item_name", String(100), nullable=True, index=True),
    Column("qty", Integer, nullable=True),
    Column("material", String(NAME_LENGTH), nullable=True),
    Column("thickness", Float, nullable=True),
    Column("width", Float, nullable=True),
    Column("length", Float, nullable=True),
    Column("prime_code", String(NAME_LENGTH), nullable=True),
    Column("event_tag", String(EVENT_ID_LENGTH), nullable=True),
    Column("customer", String(NAME_LENGTH), nullable=True),
    Column("dwg_number", String(NAME_LENGTH), nullable=True),
    Column("remark", String(NAME_LENGTH), nullable=True),
    Column("job", String(NAME_LENGTH), nullable=True),
    Column("shipment", String(NAME_LENGTH), nullable=True),
    Column("charge_ref", String(NAME_LENGTH), nullable=True),
    Column("op1", String(NAME_LENGTH), nullable=True),
    Column("op2", String(NAME_LENGTH), nullable=True),
    Column("op3", String(NAME_LENGTH), nullable=True),
    Column("mark", String(NAME_LENGTH), nullable=True),
    Column("raw_material_master", String(NAME_LENGTH), nullable=True),
    Column("heat_number", String(NAME_LENGTH), nullable=True),
    Column("note1", String(NAME_LENGTH), nullable=True),
    Column("note2", String(NAME_LENGTH), nullable=True),
    Column("note3", String(NAME_LENGTH), nullable=True),
    Column("note4", String(NAME_LENGTH), nullable=True),
    Column("file_name", String(255), nullable=True),
    Column("program_name", String(NAME_LENGTH), nullable=True),
    Column("program_repeat", Integer, nullable=True),
    Column("created_at", UTCDateTime(), nullable=False),
)

# Target archives -----------------------------------------------------------------

program_archive_table = Table(
    "program_archive",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("archive_packet_id", Integer, nullable=False),
    Column("trans_type", String(10), nullable=False),
    Column("program_name", String(NAME_LENGTH), nullable=False),
    Column("repeat_id", Integer, nullable=True),
    Column("machine_name", String(NAME_LENGTH), nullable=True),
    Column("cutting_time", Float, nullable=True),
)

part_archive_table = Table(
    "part_in_process_archive",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("archive_packet_id", Integer, nullable=False),
    Column("trans_type", String(10), nullable=False),
    Column("part_name", String(100), nullable=False),
    Column("work_order", String(NAME_LENGTH), nullable=False),
    Column("sheet_name", String(NAME_LENGTH), nullable=True),
    Column("qty_in_process", Integer, nullable=False, default=0),
    Column("true_area", Float, nullable=True),
    Column("nested_area", Float, nullable=True),
)

auxiliary_archive_table = Table(
    "auxiliary_archive",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "category",
        Enum(ArchiveCategory, native_enum=False, values_callable=_enum_values),
        nullable=False,
        index=True,
    ),
    Column("archive_packet_id", Integer, nullable=False),
    Column("trans_type", String(10), nullable=False),
    Column("item_name", String(100), nullable=True),
)


@cache
def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for the domain model."""

    log.info("Starting SQLAlchemy mappers")

    mapper_registry.map_imperatively(InterfaceConfig, interface_config_table)
    mapper_registry.map_imperatively(PartAllocation, part_allocation_table)
    mapper_registry.map_imperatively(SheetAllocation, sheet_allocation_table)
    mapper_registry.map_imperatively(DemandLine, demand_line_table)
    mapper_registry.map_imperatively(PartInProcess, part_in_process_table)
    mapper_registry.map_imperatively(InventoryLine, inventory_line_table)
    mapper_registry.map_imperatively(Program, program_table)
    mapper_registry.map_imperatively(SheetInProgram, sheet_in_program_table)
    mapper_registry.map_imperatively(Remnant, remnant_table)
    mapper_registry.map_imperatively(StagingEntry, staging_entry_table)
    mapper_registry.map_imperatively(ProgramArchiveRecord, program_archive_table)
    mapper_registry.map_imperatively(PartArchiveRecord, part_archive_table)
    mapper_registry.map_imperatively(AuxiliaryArchiveRecord, auxiliary_archive_table)

    configure_mappers()
    return mapper_registry


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the mapped metadata."""

    log.info("Creating all tables")
    mapper_registry.metadata.create_all(engine)
