"""Domain port definitions for adapters."""

from __future__ import annotations

from .persistence import (
    AllocationRepository,
    ArchiveRepository,
    DemandLineRepository,
    InterfaceConfigRepository,
    InventoryLineRepository,
    ProgramRepository,
    Repository,
    StagingRepository,
)
from .unit_of_work import (
    InterfaceRepositories,
    InterfaceUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "AllocationRepository",
    "ArchiveRepository",
    "DemandLineRepository",
    "InterfaceConfigRepository",
    "InterfaceRepositories",
    "InterfaceUnitOfWork",
    "InventoryLineRepository",
    "ProgramRepository",
    "Repository",
    "RepositoryCollection",
    "StagingRepository",
    "UnitOfWork",
]
