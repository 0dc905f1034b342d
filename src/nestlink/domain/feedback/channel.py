"""Feedback channel: read Target's execution results back out of the archive tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Any

from nestlink.domain.model import ArchiveOperation, FeedbackStatus

if TYPE_CHECKING:
    from nestlink.domain.ports import ArchiveRepository, InterfaceRepositories

    from .retention import RetentionResult

log = getLogger(__name__)

PROGRAM_OPERATIONS = (ArchiveOperation.PROGRAM_POST, ArchiveOperation.PROGRAM_DELETE)
PART_OPERATIONS = (ArchiveOperation.PROGRAM_POST,)


@dataclass(frozen=True, slots=True)
class ProgramFeedback:
    id: int
    archive_packet_id: int
    status: FeedbackStatus
    program_name: str
    machine_name: str | None
    cutting_time: float | None

    def to_payload(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "archivePacketId": self.archive_packet_id,
            "status": self.status.value,
            "programName": self.program_name,
            "machineName": self.machine_name,
            "cuttingTime": self.cutting_time,
        }


@dataclass(frozen=True, slots=True)
class PartFeedback:
    id: int
    archive_packet_id: int
    sheet_name: str | None
    part_name: str
    qty: int
    job: str | None
    shipment: str | None
    true_area: float | None
    nested_area: float | None

    def to_payload(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "archivePacketId": self.archive_packet_id,
            "sheetName": self.sheet_name,
            "partName": self.part_name,
            "qty": self.qty,
            "job": self.job,
            "shipment": self.shipment,
            "trueArea": self.true_area,
            "nestedArea": self.nested_area,
        }


@dataclass(frozen=True, slots=True)
class ProgramSheetFeedback:
    archive_packet_id: int
    sheet_name: str
    material_master: str | None

    def to_payload(self) -> dict[str, Any]:
        return {
            "archivePacketId": self.archive_packet_id,
            "sheetName": self.sheet_name,
            "materialMaster": self.material_master,
        }


@dataclass(frozen=True, slots=True)
class ProgramRemnantFeedback:
    archive_packet_id: int
    remnant_name: str
    area: float | None

    def to_payload(self) -> dict[str, Any]:
        return {
            "archivePacketId": self.archive_packet_id,
            "remnantName": self.remnant_name,
            "area": self.area,
        }


@dataclass(slots=True)
class FeedbackBatch:
    retention: RetentionResult
    programs: list[ProgramFeedback] = field(default_factory=list["ProgramFeedback"])
    parts: list[PartFeedback] = field(default_factory=list["PartFeedback"])

    def to_payload(self) -> dict[str, Any]:
        return {
            "programs": [item.to_payload() for item in self.programs],
            "parts": [item.to_payload() for item in self.parts],
            "purged": {str(category): count for category, count in self.retention.purged.items()},
        }


def extract_program_feedback(archives: ArchiveRepository) -> list[ProgramFeedback]:
    feedback: list[ProgramFeedback] = []
    for record in archives.program_records(PROGRAM_OPERATIONS):
        status = FeedbackStatus.from_operation(record.trans_type)
        if status is None or record.id is None:
            continue
        feedback.append(
            ProgramFeedback(
                id=record.id,
                archive_packet_id=record.archive_packet_id,
                status=status,
                program_name=record.program_name,
                machine_name=record.machine_name,
                cutting_time=record.cutting_time,
            )
        )
    return feedback


def extract_part_feedback(repositories: InterfaceRepositories) -> list[PartFeedback]:
    """Posted part quantities with the job and shipment of their demand line.

    Rows with no processed quantity (parts on slabs rather than sheets) and rows whose
    demand line Target no longer has are left out.
    """

    feedback: list[PartFeedback] = []
    for record in repositories.archives.part_records(PART_OPERATIONS):
        if record.qty_in_process <= 0 or record.id is None:
            continue
        line = repositories.demand.get(part_name=record.part_name, work_order=record.work_order)
        if line is None:
            log.debug("No demand line for archived part %s/%s", record.work_order, record.part_name)
            continue
        feedback.append(
            PartFeedback(
                id=record.id,
                archive_packet_id=record.archive_packet_id,
                sheet_name=record.sheet_name,
                part_name=record.part_name,
                qty=record.qty_in_process,
                job=line.job,
                shipment=line.shipment,
                true_area=record.true_area,
                nested_area=record.nested_area,
            )
        )
    return feedback


def extract_program_sheets(repositories: InterfaceRepositories) -> list[ProgramSheetFeedback]:
    feedback: list[ProgramSheetFeedback] = []
    for record in repositories.archives.program_records((ArchiveOperation.PROGRAM_POST,)):
        if record.repeat_id is None:
            continue
        placements = repositories.programs.sheets_for(
            program_name=record.program_name, repeat_id=record.repeat_id
        )
        for placement in placements:
            sheet = repositories.inventory.get(placement.sheet_name)
            if sheet is None:
                continue
            feedback.append(
                ProgramSheetFeedback(
                    archive_packet_id=record.archive_packet_id,
                    sheet_name=sheet.sheet_name,
                    material_master=sheet.material_master,
                )
            )
    return feedback


def extract_program_remnants(repositories: InterfaceRepositories) -> list[ProgramRemnantFeedback]:
    feedback: list[ProgramRemnantFeedback] = []
    for record in repositories.archives.program_records((ArchiveOperation.PROGRAM_POST,)):
        if record.repeat_id is None:
            continue
        remnants = repositories.programs.remnants_for(
            program_name=record.program_name, repeat_id=record.repeat_id
        )
        feedback.extend(
            ProgramRemnantFeedback(
                archive_packet_id=record.archive_packet_id,
                remnant_name=remnant.remnant_name,
                area=remnant.area,
            )
            for remnant in remnants
        )
    return feedback
