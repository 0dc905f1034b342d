"""SQLAlchemy-backed unit of work for the interface repositories."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from nestlink.adapters.sqlalchemy.mappings import start_mappers
from nestlink.adapters.sqlalchemy.migrations import upgrade_head
from nestlink.adapters.sqlalchemy.repositories import (
    SqlAlchemyAllocationRepository,
    SqlAlchemyArchiveRepository,
    SqlAlchemyDemandLineRepository,
    SqlAlchemyInterfaceConfigRepository,
    SqlAlchemyInventoryLineRepository,
    SqlAlchemyProgramRepository,
    SqlAlchemyStagingRepository,
)
from nestlink.config import get_database_config
from nestlink.domain.ports.unit_of_work import InterfaceRepositories, RepositoryCollection

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine


log = logging.getLogger(__name__)


class StartupError(RuntimeError):
    """Raised when the interface database is used before (or re-)initialisation."""


@dataclass(slots=True)
class _AdapterState:
    _engine: Engine | None = None
    _session_factory: sessionmaker[Session] | None = None

    @property
    def engine(self) -> Engine | None:
        return self._engine

    @engine.setter
    def engine(self, value: Engine | None) -> None:
        self._session_factory = None
        self._engine = value

    @property
    def session_factory(self) -> sessionmaker[Session]:
        if self._engine is None:
            raise StartupError(
                "SQLAlchemy adapter not initialised. Call nestlink.adapters.sqlalchemy."
                "unit_of_work.startup() before requesting a unit of work."
            )
        if self._session_factory is None:
            self._session_factory = sessionmaker(bind=self._engine, expire_on_commit=False)
        return self._session_factory


_STATE = _AdapterState()


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> None:
    """Initialise the SQLAlchemy engine, schema, and session factory."""

    if _STATE.engine is not None and not force:
        raise StartupError(
            "SQLAlchemy adapter already initialised. Pass force=True to reconfigure."
        )

    if engine is None:
        config = get_database_config()
        engine = create_engine(database_uri or config.uri, echo=config.echo, future=True)
    start_mappers()
    upgrade_head(engine=engine)
    _STATE.engine = engine
    log.info("Interface database ready at %s", engine.url.render_as_string(hide_password=True))


def configured_engine() -> Engine | None:
    """Return the engine currently managed by the adapter (if any)."""

    return _STATE.engine


def is_started() -> bool:
    """Return whether the adapter has been initialised."""

    return _STATE.engine is not None


def shutdown() -> None:
    """Dispose the managed engine and reset state (primarily for tests)."""

    if _STATE.engine is not None:
        _STATE.engine.dispose()
    _STATE.engine = None


class BaseSqlAlchemyUnitOfWork[TRepositories: RepositoryCollection](ABC):
    """One session, one transaction.

    Leaving the context without ``commit()`` discards pending work, so a reconciliation
    call either writes all of its staging entries or none of them.
    """

    def __init__(self) -> None:
        self.session_factory: sessionmaker[Session] = _STATE.session_factory
        self._session: Session | None = None
        self._dirty = False

    @abstractmethod
    def _build_repositories(self, session: Session) -> TRepositories: ...

    def __enter__(self) -> BaseSqlAlchemyUnitOfWork[TRepositories]:
        self.session = self.session_factory()
        self._repositories = self._build_repositories(self.session)
        self._dirty = True
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        if exc_type is not None:
            log.debug("Rolling back unit of work after %s", exc_type.__name__)
            self.rollback()
        elif self._dirty:
            log.debug("Closing unit of work without commit; pending changes discarded")
            self.rollback()
        self.session.close()
        self.session = None
        return False

    def commit(self) -> None:
        self.session.commit()
        self._dirty = False

    def rollback(self) -> None:
        self.session.rollback()
        self._dirty = False

    @property
    def repositories(self) -> TRepositories:
        if self._session is None:
            raise StartupError("Unit of work session not initialised")
        return self._repositories

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work session not initialised")
        return self._session

    @session.setter
    def session(self, session: Session | None) -> None:
        if self._session is not None and session is not None:
            raise StartupError("Unit of work session already initialised")
        self._session = session


class SqlAlchemyUnitOfWork(BaseSqlAlchemyUnitOfWork[InterfaceRepositories]):
    """Unit of work spanning configuration, ledger, Target mirrors, staging log and archives."""

    def _build_repositories(self, session: Session) -> InterfaceRepositories:
        return InterfaceRepositories(
            configs=SqlAlchemyInterfaceConfigRepository(session),
            allocations=SqlAlchemyAllocationRepository(session),
            demand=SqlAlchemyDemandLineRepository(session),
            inventory=SqlAlchemyInventoryLineRepository(session),
            programs=SqlAlchemyProgramRepository(session),
            staging=SqlAlchemyStagingRepository(session),
            archives=SqlAlchemyArchiveRepository(session),
        )


if TYPE_CHECKING:
    from nestlink.domain.ports.unit_of_work import InterfaceUnitOfWork

    _uow_check: InterfaceUnitOfWork = SqlAlchemyUnitOfWork()
