"""SQLAlchemy adapter package."""

from __future__ import annotations

from .mappings import create_all_tables, mapper_registry, start_mappers
from .repositories import (
    SqlAlchemyAllocationRepository,
    SqlAlchemyArchiveRepository,
    SqlAlchemyDemandLineRepository,
    SqlAlchemyInterfaceConfigRepository,
    SqlAlchemyInventoryLineRepository,
    SqlAlchemyProgramRepository,
    SqlAlchemyStagingRepository,
)

__all__ = [
    "SqlAlchemyAllocationRepository",
    "SqlAlchemyArchiveRepository",
    "SqlAlchemyDemandLineRepository",
    "SqlAlchemyInterfaceConfigRepository",
    "SqlAlchemyInventoryLineRepository",
    "SqlAlchemyProgramRepository",
    "SqlAlchemyStagingRepository",
    "create_all_tables",
    "mapper_registry",
    "start_mappers",
]
