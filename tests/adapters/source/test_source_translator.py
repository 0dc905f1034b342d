from __future__ import annotations

import pytest

from nestlink.adapters.source import (
    parse_demand_push,
    parse_inventory_push,
    parse_program_update_push,
)
from nestlink.config import MissingConfigurationError, SourceConfig
from nestlink.domain.model import SheetType

INVENTORY = {
    "sap_event_id": "1",
    "sheet_name": "R-1",
    "sheet_type": "Remnant",
    "qty": 2,
    "matl": "A36",
    "thk": 0.5,
    "wid": 20,
    "len": 30,
    "mm": "MM1",
    "notes2": "bay 3",
}


def test_demand_push_carries_descriptors() -> None:
    push = parse_demand_push(
        {
            "sap_system": "PRD",
            "sap_event_id": "4711000000000000001",
            "work_order": "WO-100",
            "part_name": "J1-PLATE-7",
            "qty": 10,
            "matl": "A36",
            "job": "J1",
            "op2": "DRILL",
        }
    )

    assert push.event.system == "PRD"
    assert push.event.truncated_id == "0000000001"
    assert (push.work_order, push.part_name, push.quantity) == ("WO-100", "J1-PLATE-7", 10)
    assert push.op2 == "DRILL"
    assert push.resolved_mark() == "PLATE-7"


def test_default_system_fills_missing_system() -> None:
    push = parse_inventory_push(INVENTORY, source=SourceConfig(default_system="QAS"))

    assert push.event.system == "QAS"
    assert push.sheet_type is SheetType.REMNANT
    assert push.is_remnant is True
    assert push.notes == (None, "bay 3", None, None)
    assert push.note(1) == "bay 3"


def test_payload_system_overrides_default() -> None:
    push = parse_program_update_push(
        {"sap_system": "PRD", "sap_event_id": "5", "archive_packet_id": 77},
        source=SourceConfig(default_system="QAS"),
    )

    assert push.event.system == "PRD"
    assert push.archive_packet_id == 77


def test_default_system_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NESTLINK_SOURCE_SYSTEM", "DEV")

    push = parse_inventory_push(INVENTORY)

    assert push.event.system == "DEV"


def test_missing_system_is_a_configuration_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NESTLINK_SOURCE_SYSTEM", raising=False)

    with pytest.raises(MissingConfigurationError):
        parse_inventory_push(INVENTORY)
