from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import create_engine, inspect, select, text

from nestlink.adapters.sqlalchemy import create_all_tables, start_mappers
from nestlink.adapters.sqlalchemy.mappings import auxiliary_archive_table
from nestlink.domain.model import ArchiveCategory, AuxiliaryArchiveRecord, StagingEntry, TransType

if TYPE_CHECKING:
    from sqlalchemy.orm import Session


def test_start_mappers_is_idempotent() -> None:
    start_mappers()
    start_mappers()


def test_create_all_tables_matches_metadata() -> None:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    start_mappers()
    create_all_tables(engine)

    tables = set(inspect(engine).get_table_names())

    assert {"staging_entry", "demand_line", "inventory_line", "program_archive"} <= tables
    engine.dispose()


def test_enums_are_stored_by_value(sqlite_session: Session) -> None:
    sqlite_session.add(
        StagingEntry(
            trans_type=TransType.STANDARD_STOCK_UPSERT,
            district=1,
            event_id="1",
            truncated_event_id="1",
        )
    )
    sqlite_session.add(
        AuxiliaryArchiveRecord(
            category=ArchiveCategory.WORK_ORDER, archive_packet_id=1, trans_type="SN100"
        )
    )
    sqlite_session.flush()

    raw_trans_type = sqlite_session.execute(
        text("SELECT trans_type FROM staging_entry")
    ).scalar_one()

    assert raw_trans_type == "SN91A"
    raw_category = sqlite_session.execute(
        text("SELECT category FROM auxiliary_archive")
    ).scalar_one()
    assert raw_category == "work_order"
    category = sqlite_session.execute(select(auxiliary_archive_table.c.category)).scalar_one()
    assert category is ArchiveCategory.WORK_ORDER


def test_created_at_round_trips_as_utc(sqlite_session: Session) -> None:
    stamp = datetime(2026, 3, 1, 12, 30, tzinfo=UTC)
    entry = StagingEntry(
        trans_type=TransType.DEMAND_DELETE,
        district=1,
        event_id="1",
        truncated_event_id="1",
        created_at=stamp,
    )
    sqlite_session.add(entry)
    sqlite_session.commit()
    sqlite_session.expire_all()

    stored = sqlite_session.execute(select(StagingEntry)).scalar_one()

    assert stored.created_at == stamp
    assert stored.created_at.tzinfo is not None
