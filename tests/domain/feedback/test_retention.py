from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

import pytest

from nestlink.domain.feedback import (
    DEFAULT_RETENTION,
    RetentionPolicy,
    RetentionRule,
    apply_retention,
)
from nestlink.domain.model import (
    ArchiveCategory,
    AuxiliaryArchiveRecord,
    PartArchiveRecord,
    ProgramArchiveRecord,
)
from tests.helpers.interface import seed

if TYPE_CHECKING:
    from collections.abc import Callable

    from nestlink.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork

    UowFactory = Callable[[], SqlAlchemyUnitOfWork]


def _program(trans_type: str, name: str = "P-1") -> ProgramArchiveRecord:
    return ProgramArchiveRecord(
        archive_packet_id=77, trans_type=trans_type, program_name=name, repeat_id=1
    )


def _part(trans_type: str, qty: int = 2) -> PartArchiveRecord:
    return PartArchiveRecord(
        archive_packet_id=77,
        trans_type=trans_type,
        part_name="J1-PLATE-7",
        work_order="WO-100",
        qty_in_process=qty,
    )


def _aux(category: ArchiveCategory) -> AuxiliaryArchiveRecord:
    return AuxiliaryArchiveRecord(
        category=category, archive_packet_id=77, trans_type="SN100", item_name="X"
    )


@pytest.fixture
def archived(sqlite_unit_of_work: UowFactory) -> UowFactory:
    seed(
        sqlite_unit_of_work,
        _program("SN100"),
        _program("SN101"),
        _program("SN102"),
        _part("SN100"),
        _part("SN101"),
        _aux(ArchiveCategory.PART),
        _aux(ArchiveCategory.REMNANT),
        _aux(ArchiveCategory.SHEET),
        _aux(ArchiveCategory.SHEET),
        _aux(ArchiveCategory.WORK_ORDER),
    )
    return sqlite_unit_of_work


def test_default_policy_purges_unmatched_and_unread_rows(archived: UowFactory) -> None:
    with archived() as uow:
        result = apply_retention(uow.repositories.archives)
        uow.commit()

    assert result.purged == {
        ArchiveCategory.PROGRAM: 1,
        ArchiveCategory.PART_IN_PROCESS: 1,
        ArchiveCategory.PART: 1,
        ArchiveCategory.REMNANT: 1,
        ArchiveCategory.SHEET: 2,
        ArchiveCategory.WORK_ORDER: 1,
    }
    assert result.total == 7

    with archived() as uow:
        programs = uow.repositories.archives.program_records()
        parts = uow.repositories.archives.part_records()
    assert sorted(record.trans_type for record in programs) == ["SN100", "SN101"]
    assert [record.trans_type for record in parts] == ["SN100"]


def test_retention_is_idempotent(archived: UowFactory) -> None:
    with archived() as uow:
        apply_retention(uow.repositories.archives)
        uow.commit()

    with archived() as uow:
        second = apply_retention(uow.repositories.archives)
        uow.commit()

    assert second.total == 0


def test_keep_rule_leaves_category_alone(archived: UowFactory) -> None:
    policies = MappingProxyType(
        {
            **DEFAULT_RETENTION,
            ArchiveCategory.SHEET: RetentionPolicy(RetentionRule.KEEP),
        }
    )

    with archived() as uow:
        result = apply_retention(uow.repositories.archives, policies)
        uow.commit()

    assert ArchiveCategory.SHEET not in result.purged
    assert result.purged[ArchiveCategory.REMNANT] == 1


def test_discard_if_unmatched_requires_operations() -> None:
    with pytest.raises(ValueError, match="at least one"):
        RetentionPolicy(RetentionRule.DISCARD_IF_UNMATCHED)


def test_default_table_names_every_category() -> None:
    assert set(DEFAULT_RETENTION) == set(ArchiveCategory)
    assert DEFAULT_RETENTION[ArchiveCategory.PROGRAM].keep == {"SN100", "SN101"}
    assert DEFAULT_RETENTION[ArchiveCategory.PART_IN_PROCESS].keep == {"SN100"}
