from __future__ import annotations

import pytest

from nestlink.domain.model import (
    ArchiveOperation,
    FeedbackStatus,
    InterfaceConfig,
    SheetType,
    StagingEntry,
    TransType,
)


def test_remnant_path_substitutes_sheet_name_verbatim() -> None:
    config = InterfaceConfig(
        system="PRD", district=1, remnant_template=r"\\cad\remnants\<sheet_name>.dxf"
    )

    assert config.remnant_path("R 12/A") == r"\\cad\remnants\R 12/A.dxf"


def test_remnant_path_without_template_is_none() -> None:
    config = InterfaceConfig(system="PRD", district=1)

    assert config.remnant_path("R1") is None


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("Remnant", SheetType.REMNANT),
        (" Remnant ", SheetType.REMNANT),
        ("Standard", SheetType.STANDARD),
        ("remnant", SheetType.STANDARD),
        ("Offcut", SheetType.STANDARD),
        (None, SheetType.STANDARD),
    ],
)
def test_sheet_type_parse(value: str | None, expected: SheetType) -> None:
    assert SheetType.parse(value) is expected


def test_trans_type_values_are_transfer_codes() -> None:
    assert [member.value for member in TransType] == ["SN81", "SN82", "SN91A", "SN97", "SN76"]


def test_feedback_status_from_operation() -> None:
    assert FeedbackStatus.from_operation(ArchiveOperation.PROGRAM_POST) is FeedbackStatus.CREATED
    assert FeedbackStatus.from_operation("SN101") is FeedbackStatus.DELETED
    assert FeedbackStatus.from_operation("SN102") is None


def test_staging_entry_defaults() -> None:
    entry = StagingEntry(
        trans_type=TransType.DEMAND_DELETE,
        district=1,
        event_id="1",
        truncated_event_id="1",
    )

    assert entry.notes == (None, None, None, None)
    assert entry.created_at.tzinfo is not None
    assert entry.id is None
