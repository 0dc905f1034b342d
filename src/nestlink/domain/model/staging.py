"""Outbox records drained into Target by the transfer process."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .enums import TransType


@dataclass(eq=False, kw_only=True)
class StagingEntry:
    """One staged Target operation.

    The field set is a superset across operation codes; unused fields stay ``None``.
    """

    trans_type: TransType
    district: int
    event_id: str
    truncated_event_id: str

    order_no: str | None = None
    item_name: str | None = None
    qty: int | None = None
    material: str | None = None
    thickness: float | None = None
    width: float | None = None
    length: float | None = None
    prime_code: str | None = None
    event_tag: str | None = None

    # demand descriptors
    customer: str | None = None
    dwg_number: str | None = None
    remark: str | None = None
    job: str | None = None
    shipment: str | None = None
    charge_ref: str | None = None
    op1: str | None = None
    op2: str | None = None
    op3: str | None = None
    mark: str | None = None
    raw_material_master: str | None = None
    heat_number: str | None = None

    note1: str | None = None
    note2: str | None = None
    note3: str | None = None
    note4: str | None = None
    file_name: str | None = None

    program_name: str | None = None
    program_repeat: int | None = None

    created_at: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    id: int | None = None

    @property
    def notes(self) -> tuple[str | None, str | None, str | None, str | None]:
        return (self.note1, self.note2, self.note3, self.note4)
