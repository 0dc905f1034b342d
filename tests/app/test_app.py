from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from nestlink import app
from nestlink.adapters.sqlalchemy.unit_of_work import is_started, shutdown
from nestlink.config import SourceConfig
from nestlink.domain.model import TransType
from nestlink.domain.reconciliation import ReconcileStatus
from tests.helpers.interface import staged

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from nestlink.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork

    UowFactory = Callable[[], SqlAlchemyUnitOfWork]


def _demand(part_name: str, qty: int) -> dict[str, object]:
    return {
        "sap_event_id": "4711000000000000001",
        "work_order": "WO-100",
        "part_name": part_name,
        "qty": qty,
        "matl": "A36",
    }


def test_push_source_demand_applies_calls_in_order(routed_unit_of_work: UowFactory) -> None:
    results = app.push_source_demand(
        [_demand("P-1", 4), _demand("P-2", 0)],
        unit_of_work_factory=routed_unit_of_work,
        source=SourceConfig(default_system="PRD"),
    )

    assert [result.status for result in results] == [
        ReconcileStatus.APPLIED,
        ReconcileStatus.NOTHING_TO_PUSH,
    ]
    assert [entry.item_name for entry in staged(routed_unit_of_work)] == ["P-1"]


def test_push_source_inventory_and_program_update(routed_unit_of_work: UowFactory) -> None:
    inventory = app.push_source_inventory(
        [
            {
                "sap_system": "PRD",
                "sap_event_id": "2",
                "sheet_name": "SH1",
                "qty": 5,
                "matl": "A36",
                "thk": 0.25,
                "wid": 48,
                "len": 96,
                "mm": "MM1",
            }
        ],
        unit_of_work_factory=routed_unit_of_work,
    )
    program = app.push_source_program_update(
        [{"sap_system": "PRD", "sap_event_id": "3", "archive_packet_id": 1}],
        unit_of_work_factory=routed_unit_of_work,
    )

    assert inventory[0].status is ReconcileStatus.APPLIED
    assert program[0].status is ReconcileStatus.PROGRAM_NOT_FOUND
    [entry] = staged(routed_unit_of_work)
    assert entry.trans_type is TransType.STANDARD_STOCK_UPSERT


def test_feedback_exports_are_empty_without_archives(sqlite_unit_of_work: UowFactory) -> None:
    batch = app.export_feedback(unit_of_work_factory=sqlite_unit_of_work)

    assert batch.programs == []
    assert batch.parts == []
    assert batch.retention.total == 0
    assert app.export_program_sheets(unit_of_work_factory=sqlite_unit_of_work) == []
    assert app.export_program_remnants(unit_of_work_factory=sqlite_unit_of_work) == []
    assert app.acknowledge_program_feedback(1, unit_of_work_factory=sqlite_unit_of_work) is False
    assert app.acknowledge_part_feedback(1, unit_of_work_factory=sqlite_unit_of_work) is False


@pytest.fixture
def fresh_adapter(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("DATABASE_URI", "sqlite+pysqlite:///:memory:")
    shutdown()
    yield
    shutdown()


@pytest.mark.usefixtures("fresh_adapter")
def test_default_unit_of_work_starts_adapter_once() -> None:
    assert is_started() is False

    app.configure_district("PRD", district=7, remnant_template="/r/<sheet_name>.dxf")
    config = app.configure_district("PRD", district=8)

    assert is_started() is True
    assert config.district == 8
    assert config.remnant_template is None
