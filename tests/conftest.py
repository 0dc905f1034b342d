from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.orm import Session, sessionmaker

from nestlink.adapters.sqlalchemy import start_mappers
from nestlink.adapters.sqlalchemy.migrations import upgrade_head
from nestlink.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork, shutdown, startup
from nestlink.domain.model import InterfaceConfig
from tests.helpers.interface import REMNANT_TEMPLATE, seed

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    start_mappers()
    upgrade_head(engine=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sqlite_session(sqlite_engine: Engine) -> Iterator[Session]:
    session_factory = sessionmaker(bind=sqlite_engine, future=True)
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def sqlite_unit_of_work(
    sqlite_engine: Engine,
) -> Iterator[Callable[[], SqlAlchemyUnitOfWork]]:
    startup(engine=sqlite_engine, force=True)

    def factory() -> SqlAlchemyUnitOfWork:
        return SqlAlchemyUnitOfWork()

    try:
        yield factory
    finally:
        shutdown()


@pytest.fixture
def routed_unit_of_work(
    sqlite_unit_of_work: Callable[[], SqlAlchemyUnitOfWork],
) -> Callable[[], SqlAlchemyUnitOfWork]:
    """Unit of work factory with Source system PRD routed to district 1."""

    seed(
        sqlite_unit_of_work,
        InterfaceConfig(system="PRD", district=1, remnant_template=REMNANT_TEMPLATE),
    )
    return sqlite_unit_of_work
