"""Translate validated Source payloads into reconciliation requests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from nestlink.config import MissingConfigurationError, get_source_config
from nestlink.config.source import SOURCE_SYSTEM_ENV
from nestlink.domain.model import SheetType, SourceEvent
from nestlink.domain.reconciliation import DemandPush, InventoryPush, ProgramUpdatePush

from .schema import DemandPayload, InventoryPayload, ProgramUpdatePayload

if TYPE_CHECKING:
    from nestlink.config import SourceConfig

    from .schema import (
        DemandPayloadInput,
        InventoryPayloadInput,
        ProgramUpdatePayloadInput,
        SourcePayload,
    )


def _source_event(payload: SourcePayload, source: SourceConfig | None) -> SourceEvent:
    system = payload.system
    if system is None:
        system = (source or get_source_config()).default_system
    if system is None:
        raise MissingConfigurationError(
            f"Payload has no sap_system and {SOURCE_SYSTEM_ENV} is not set",
            names=(SOURCE_SYSTEM_ENV,),
        )
    return SourceEvent(system=system, event_id=payload.event_id)


def parse_demand_push(
    payload: DemandPayloadInput, *, source: SourceConfig | None = None
) -> DemandPush:
    if not isinstance(payload, DemandPayload):
        payload = DemandPayload.model_validate(payload)
    return DemandPush(
        event=_source_event(payload, source),
        work_order=payload.work_order,
        part_name=payload.part_name,
        quantity=payload.quantity,
        material=payload.material,
        state=payload.state,
        dwg=payload.dwg,
        codegen=payload.codegen,
        job=payload.job,
        shipment=payload.shipment,
        charge_ref=payload.charge_ref,
        op1=payload.op1,
        op2=payload.op2,
        op3=payload.op3,
        mark=payload.mark,
        raw_material_master=payload.raw_material_master,
    )


def parse_inventory_push(
    payload: InventoryPayloadInput, *, source: SourceConfig | None = None
) -> InventoryPush:
    if not isinstance(payload, InventoryPayload):
        payload = InventoryPayload.model_validate(payload)
    return InventoryPush(
        event=_source_event(payload, source),
        sheet_name=payload.sheet_name,
        sheet_type=SheetType.parse(payload.sheet_type),
        quantity=payload.quantity,
        material=payload.material,
        thickness=payload.thickness,
        width=payload.width,
        length=payload.length,
        material_master=payload.material_master,
        notes=payload.notes,
    )


def parse_program_update_push(
    payload: ProgramUpdatePayloadInput, *, source: SourceConfig | None = None
) -> ProgramUpdatePush:
    if not isinstance(payload, ProgramUpdatePayload):
        payload = ProgramUpdatePayload.model_validate(payload)
    return ProgramUpdatePush(
        event=_source_event(payload, source),
        archive_packet_id=payload.archive_packet_id,
    )
