"""Pydantic models describing the payloads Source pushes into the interface."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

EVENT_ID_PATTERN = r"^\d{1,20}$"


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class SourceBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class SourcePayload(SourceBaseModel):
    """Fields every Source call carries."""

    system: str | None = Field(default=None, alias="sap_system", max_length=3)
    event_id: str = Field(alias="sap_event_id", pattern=EVENT_ID_PATTERN)

    _normalize_system = field_validator("system", mode="before")(_blank_to_none)

    @field_validator("event_id", mode="before")
    @classmethod
    def _coerce_event_id(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        if isinstance(value, str):
            return value.strip()
        return value


class DemandPayload(SourcePayload):
    work_order: str
    part_name: str
    quantity: int = Field(alias="qty")
    material: str = Field(alias="matl")
    state: str | None = None
    dwg: str | None = None
    codegen: str | None = None
    job: str | None = None
    shipment: str | None = None
    charge_ref: str | None = Field(default=None, alias="chargeref")
    op1: str | None = None
    op2: str | None = None
    op3: str | None = None
    mark: str | None = None
    raw_material_master: str | None = Field(default=None, alias="raw_mm")

    _normalize_optional = field_validator(
        "state",
        "dwg",
        "codegen",
        "job",
        "shipment",
        "charge_ref",
        "op1",
        "op2",
        "op3",
        "mark",
        "raw_material_master",
        mode="before",
    )(_blank_to_none)


class InventoryPayload(SourcePayload):
    sheet_name: str
    sheet_type: str | None = None
    quantity: int = Field(alias="qty")
    material: str = Field(alias="matl")
    thickness: float = Field(alias="thk")
    width: float = Field(alias="wid")
    length: float = Field(alias="len")
    material_master: str = Field(alias="mm")
    note1: str | None = Field(default=None, alias="notes1")
    note2: str | None = Field(default=None, alias="notes2")
    note3: str | None = Field(default=None, alias="notes3")
    note4: str | None = Field(default=None, alias="notes4")

    _normalize_optional = field_validator(
        "sheet_type", "note1", "note2", "note3", "note4", mode="before"
    )(_blank_to_none)

    @property
    def notes(self) -> tuple[str | None, str | None, str | None, str | None]:
        return (self.note1, self.note2, self.note3, self.note4)


class ProgramUpdatePayload(SourcePayload):
    archive_packet_id: int


DemandPayloadInput = DemandPayload | Mapping[str, object]
InventoryPayloadInput = InventoryPayload | Mapping[str, object]
ProgramUpdatePayloadInput = ProgramUpdatePayload | Mapping[str, object]
