"""Initial interface schema.

Revision ID: 0001
Revises:
Create Date: 2026-10-17 00:00:00
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

TRANS_TYPES = ("SN81", "SN82", "SN91A", "SN97", "SN76")
ARCHIVE_CATEGORIES = ("program", "part_in_process", "part", "remnant", "sheet", "work_order")


def _id() -> sa.Column[int]:
    return sa.Column("id", sa.Integer(), autoincrement=True, nullable=False)


def upgrade() -> None:
    op.create_table(
        "interface_config",
        sa.Column("system", sa.String(length=3), nullable=False),
        sa.Column("district", sa.Integer(), nullable=False),
        sa.Column("remnant_template", sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint("system", name=op.f("pk_interface_config")),
    )

    op.create_table(
        "slab_part_allocation",
        _id(),
        sa.Column("slab_id", sa.Integer(), nullable=False),
        sa.Column("part_name", sa.String(length=100), nullable=False),
        sa.Column("work_order", sa.String(length=50), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_slab_part_allocation")),
    )
    op.create_index(
        "ix_slab_part_allocation_part", "slab_part_allocation", ["part_name", "work_order"]
    )

    op.create_table(
        "slab_sheet_allocation",
        _id(),
        sa.Column("slab_id", sa.Integer(), nullable=False),
        sa.Column("sheet_index", sa.Integer(), nullable=False),
        sa.Column("sheet_name", sa.String(length=50), nullable=False),
        sa.Column("x_position", sa.Float(), nullable=True),
        sa.Column("y_position", sa.Float(), nullable=True),
        sa.Column("rotation", sa.Float(), nullable=True),
        sa.Column("width", sa.Float(), nullable=True),
        sa.Column("length", sa.Float(), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_slab_sheet_allocation")),
    )
    op.create_index(
        op.f("ix_slab_sheet_allocation_sheet_name"), "slab_sheet_allocation", ["sheet_name"]
    )

    op.create_table(
        "demand_line",
        _id(),
        sa.Column("part_name", sa.String(length=100), nullable=False),
        sa.Column("work_order", sa.String(length=50), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("qty_completed", sa.Integer(), nullable=False),
        sa.Column("material", sa.String(length=50), nullable=True),
        sa.Column("job", sa.String(length=50), nullable=True),
        sa.Column("shipment", sa.String(length=50), nullable=True),
        sa.Column("last_event_id", sa.String(length=50), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_demand_line")),
    )
    op.create_index("ix_demand_line_part", "demand_line", ["part_name", "work_order"])

    op.create_table(
        "part_in_process",
        _id(),
        sa.Column("part_name", sa.String(length=100), nullable=False),
        sa.Column("work_order", sa.String(length=50), nullable=False),
        sa.Column("qty_in_process", sa.Integer(), nullable=False),
        sa.Column("program_name", sa.String(length=50), nullable=True),
        sa.Column("repeat_id", sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_part_in_process")),
    )
    op.create_index("ix_part_in_process_part", "part_in_process", ["part_name", "work_order"])

    op.create_table(
        "inventory_line",
        _id(),
        sa.Column("sheet_name", sa.String(length=50), nullable=False),
        sa.Column("material_master", sa.String(length=50), nullable=True),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("material", sa.String(length=50), nullable=True),
        sa.Column("thickness", sa.Float(), nullable=True),
        sa.Column("width", sa.Float(), nullable=True),
        sa.Column("length", sa.Float(), nullable=True),
        sa.Column("last_event_id", sa.String(length=50), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_inventory_line")),
    )
    op.create_index(op.f("ix_inventory_line_sheet_name"), "inventory_line", ["sheet_name"])
    op.create_index(
        op.f("ix_inventory_line_material_master"), "inventory_line", ["material_master"]
    )

    op.create_table(
        "program",
        _id(),
        sa.Column("program_name", sa.String(length=50), nullable=False),
        sa.Column("repeat_id", sa.Integer(), nullable=False),
        sa.Column("archive_packet_id", sa.Integer(), nullable=True),
        sa.Column("machine_name", sa.String(length=50), nullable=True),
        sa.Column("cutting_time", sa.Float(), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_program")),
    )
    op.create_index(op.f("ix_program_archive_packet_id"), "program", ["archive_packet_id"])

    op.create_table(
        "sheet_in_program",
        _id(),
        sa.Column("program_name", sa.String(length=50), nullable=False),
        sa.Column("repeat_id", sa.Integer(), nullable=False),
        sa.Column("sheet_name", sa.String(length=50), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_sheet_in_program")),
    )
    op.create_index(
        "ix_sheet_in_program_program", "sheet_in_program", ["program_name", "repeat_id"]
    )

    op.create_table(
        "remnant",
        _id(),
        sa.Column("remnant_name", sa.String(length=50), nullable=False),
        sa.Column("program_name", sa.String(length=50), nullable=False),
        sa.Column("repeat_id", sa.Integer(), nullable=False),
        sa.Column("area", sa.Float(), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_remnant")),
    )
    op.create_index("ix_remnant_program", "remnant", ["program_name", "repeat_id"])

    op.create_table(
        "staging_entry",
        _id(),
        sa.Column(
            "trans_type",
            sa.Enum(*TRANS_TYPES, name="transtype", native_enum=False),
            nullable=False,
        ),
        sa.Column("district", sa.Integer(), nullable=False),
        sa.Column("event_id", sa.String(length=50), nullable=False),
        sa.Column("truncated_event_id", sa.String(length=10), nullable=False),
        sa.Column("order_no", sa.String(length=50), nullable=True),
        sa.Column("item_name", sa.String(length=100), nullable=True),
        sa.Column("qty", sa.Integer(), nullable=True),
        sa.Column("material", sa.String(length=50), nullable=True),
        sa.Column("thickness", sa.Float(), nullable=True),
        sa.Column("width", sa.Float(), nullable=True),
        sa.Column("length", sa.Float(), nullable=True),
        sa.Column("prime_code", sa.String(length=50), nullable=True),
        sa.Column("event_tag", sa.String(length=50), nullable=True),
        sa.Column("customer", sa.String(length=50), nullable=True),
        sa.Column("dwg_number", sa.String(length=50), nullable=True),
        sa.Column("remark", sa.String(length=50), nullable=True),
        sa.Column("job", sa.String(length=50), nullable=True),
        sa.Column("shipment", sa.String(length=50), nullable=True),
        sa.Column("charge_ref", sa.String(length=50), nullable=True),
        sa.Column("op1", sa.String(length=50), nullable=True),
        sa.Column("op2", sa.String(length=50), nullable=True),
        sa.Column("op3", sa.String(length=50), nullable=True),
        sa.Column("mark", sa.String(length=50), nullable=True),
        sa.Column("raw_material_master", sa.String(length=50), nullable=True),
        sa.Column("heat_number", sa.String(length=50), nullable=True),
        sa.Column("note1", sa.String(length=50), nullable=True),
        sa.Column("note2", sa.String(length=50), nullable=True),
        sa.Column("note3", sa.String(length=50), nullable=True),
        sa.Column("note4", sa.String(length=50), nullable=True),
        sa.Column("file_name", sa.String(length=255), nullable=True),
        sa.Column("program_name", sa.String(length=50), nullable=True),
        sa.Column("program_repeat", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_staging_entry")),
    )
    op.create_index(op.f("ix_staging_entry_event_id"), "staging_entry", ["event_id"])
    op.create_index(op.f("ix_staging_entry_item_name"), "staging_entry", ["item_name"])

    op.create_table(
        "program_archive",
        _id(),
        sa.Column("archive_packet_id", sa.Integer(), nullable=False),
        sa.Column("trans_type", sa.String(length=10), nullable=False),
        sa.Column("program_name", sa.String(length=50), nullable=False),
        sa.Column("repeat_id", sa.Integer(), nullable=True),
        sa.Column("machine_name", sa.String(length=50), nullable=True),
        sa.Column("cutting_time", sa.Float(), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_program_archive")),
    )

    op.create_table(
        "part_in_process_archive",
        _id(),
        sa.Column("archive_packet_id", sa.Integer(), nullable=False),
        sa.Column("trans_type", sa.String(length=10), nullable=False),
        sa.Column("part_name", sa.String(length=100), nullable=False),
        sa.Column("work_order", sa.String(length=50), nullable=False),
        sa.Column("sheet_name", sa.String(length=50), nullable=True),
        sa.Column("qty_in_process", sa.Integer(), nullable=False),
        sa.Column("true_area", sa.Float(), nullable=True),
        sa.Column("nested_area", sa.Float(), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_part_in_process_archive")),
    )

    op.create_table(
        "auxiliary_archive",
        _id(),
        sa.Column(
            "category",
            sa.Enum(*ARCHIVE_CATEGORIES, name="archivecategory", native_enum=False),
            nullable=False,
        ),
        sa.Column("archive_packet_id", sa.Integer(), nullable=False),
        sa.Column("trans_type", sa.String(length=10), nullable=False),
        sa.Column("item_name", sa.String(length=100), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_auxiliary_archive")),
    )
    op.create_index(op.f("ix_auxiliary_archive_category"), "auxiliary_archive", ["category"])


def downgrade() -> None:
    op.drop_index(op.f("ix_auxiliary_archive_category"), table_name="auxiliary_archive")
    op.drop_table("auxiliary_archive")
    op.drop_table("part_in_process_archive")
    op.drop_table("program_archive")
    op.drop_index(op.f("ix_staging_entry_item_name"), table_name="staging_entry")
    op.drop_index(op.f("ix_staging_entry_event_id"), table_name="staging_entry")
    op.drop_table("staging_entry")
    op.drop_index("ix_remnant_program", table_name="remnant")
    op.drop_table("remnant")
    op.drop_index("ix_sheet_in_program_program", table_name="sheet_in_program")
    op.drop_table("sheet_in_program")
    op.drop_index(op.f("ix_program_archive_packet_id"), table_name="program")
    op.drop_table("program")
    op.drop_index(op.f("ix_inventory_line_material_master"), table_name="inventory_line")
    op.drop_index(op.f("ix_inventory_line_sheet_name"), table_name="inventory_line")
    op.drop_table("inventory_line")
    op.drop_index("ix_part_in_process_part", table_name="part_in_process")
    op.drop_table("part_in_process")
    op.drop_index("ix_demand_line_part", table_name="demand_line")
    op.drop_table("demand_line")
    op.drop_index(
        op.f("ix_slab_sheet_allocation_sheet_name"), table_name="slab_sheet_allocation"
    )
    op.drop_table("slab_sheet_allocation")
    op.drop_index("ix_slab_part_allocation_part", table_name="slab_part_allocation")
    op.drop_table("slab_part_allocation")
    op.drop_table("interface_config")
