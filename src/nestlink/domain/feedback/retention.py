"""Named retention policies for Target's archive tables.

Each archive category states explicitly what survives a sweep. Categories nobody reads
yet are discarded wholesale; giving one a consumer means switching its rule here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from logging import getLogger
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from nestlink.domain.model import ArchiveCategory, ArchiveOperation

if TYPE_CHECKING:
    from collections.abc import Mapping

    from nestlink.domain.ports import ArchiveRepository

log = getLogger(__name__)


class RetentionRule(StrEnum):
    KEEP = "keep"
    DISCARD_ALWAYS = "discard_always"
    DISCARD_IF_UNMATCHED = "discard_if_unmatched"


@dataclass(frozen=True, slots=True)
class RetentionPolicy:
    rule: RetentionRule
    keep: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        if self.rule is RetentionRule.DISCARD_IF_UNMATCHED and not self.keep:
            raise ValueError("discard_if_unmatched needs at least one operation to keep")


DEFAULT_RETENTION: Final[Mapping[ArchiveCategory, RetentionPolicy]] = MappingProxyType(
    {
        ArchiveCategory.PROGRAM: RetentionPolicy(
            RetentionRule.DISCARD_IF_UNMATCHED,
            frozenset({ArchiveOperation.PROGRAM_POST, ArchiveOperation.PROGRAM_DELETE}),
        ),
        ArchiveCategory.PART_IN_PROCESS: RetentionPolicy(
            RetentionRule.DISCARD_IF_UNMATCHED,
            frozenset({ArchiveOperation.PROGRAM_POST}),
        ),
        ArchiveCategory.PART: RetentionPolicy(RetentionRule.DISCARD_ALWAYS),
        ArchiveCategory.REMNANT: RetentionPolicy(RetentionRule.DISCARD_ALWAYS),
        ArchiveCategory.SHEET: RetentionPolicy(RetentionRule.DISCARD_ALWAYS),
        ArchiveCategory.WORK_ORDER: RetentionPolicy(RetentionRule.DISCARD_ALWAYS),
    }
)


@dataclass(slots=True)
class RetentionResult:
    purged: dict[ArchiveCategory, int] = field(default_factory=dict["ArchiveCategory", int])

    @property
    def total(self) -> int:
        return sum(self.purged.values())


def apply_retention(
    archives: ArchiveRepository,
    policies: Mapping[ArchiveCategory, RetentionPolicy] = DEFAULT_RETENTION,
) -> RetentionResult:
    """Purge archive rows each category's policy does not keep."""

    result = RetentionResult()
    for category, policy in policies.items():
        if policy.rule is RetentionRule.KEEP:
            continue
        keep = policy.keep if policy.rule is RetentionRule.DISCARD_IF_UNMATCHED else None
        result.purged[category] = archives.purge(category, keep=keep)

    if result.total:
        log.info(
            "Retention purged %d archive rows: %s",
            result.total,
            ", ".join(f"{category}={count}" for category, count in result.purged.items() if count),
        )
    return result
