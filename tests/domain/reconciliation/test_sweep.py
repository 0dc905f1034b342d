from __future__ import annotations

from dataclasses import dataclass

from nestlink.domain.model import StagingEntry, TransType
from nestlink.domain.reconciliation.sweep import should_sweep, sweep
from tests.helpers.interface import FakeStagingRepository, make_event


@dataclass
class _Record:
    name: str
    last_event_id: str | None = None


def _removal(record: _Record) -> StagingEntry:
    event = make_event()
    return StagingEntry(
        trans_type=TransType.DEMAND_DELETE,
        district=1,
        event_id=event.event_id,
        truncated_event_id=event.truncated_id,
        item_name=record.name,
    )


def test_sweep_stages_one_removal_per_candidate() -> None:
    staging = FakeStagingRepository()
    records = [_Record("A"), _Record("B", last_event_id="99")]

    outcome = sweep(
        staging,
        make_event(),
        candidates=lambda: records,
        last_seen=lambda record: record.last_event_id,
        removal=_removal,
    )

    assert outcome.executed is True
    assert [entry.item_name for entry in outcome.entries] == ["A", "B"]
    assert staging.items == outcome.entries


def test_sweep_skips_records_already_tagged_with_event() -> None:
    event = make_event()
    staging = FakeStagingRepository()
    records = [_Record("A", last_event_id=event.event_id), _Record("B")]

    outcome = sweep(
        staging,
        event,
        candidates=lambda: records,
        last_seen=lambda record: record.last_event_id,
        removal=_removal,
    )

    assert [entry.item_name for entry in outcome.entries] == ["B"]


def test_sweep_runs_once_per_event() -> None:
    staging = FakeStagingRepository()
    records = [_Record("A")]

    def run() -> bool:
        return sweep(
            staging,
            make_event(),
            candidates=lambda: records,
            last_seen=lambda record: record.last_event_id,
            removal=_removal,
        ).executed

    assert run() is True
    assert run() is False
    assert len(staging.items) == 1


def test_sweep_gate_keys_on_full_event_id() -> None:
    staging = FakeStagingRepository([_removal(_Record("A"))])
    colliding = make_event("94711000000000000001")

    assert colliding.truncated_id == make_event().truncated_id
    assert should_sweep(staging, colliding) is True
    assert should_sweep(staging, make_event()) is False


def test_sweep_does_not_consult_candidates_when_gated() -> None:
    staging = FakeStagingRepository([_removal(_Record("A"))])

    def candidates() -> list[_Record]:
        raise AssertionError("candidates should not be loaded")

    outcome = sweep(
        staging,
        make_event(),
        candidates=candidates,
        last_seen=lambda record: record.last_event_id,
        removal=_removal,
    )

    assert outcome.executed is False
    assert outcome.entries == []
