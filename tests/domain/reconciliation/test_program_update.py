from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from nestlink.domain.data_integration import push_program_update
from nestlink.domain.model import Program, TransType
from nestlink.domain.reconciliation import ProgramUpdatePush, ReconcileStatus
from tests.helpers.interface import make_event, seed, staged

if TYPE_CHECKING:
    from collections.abc import Callable

    from nestlink.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork

    UowFactory = Callable[[], SqlAlchemyUnitOfWork]


def test_revision_accept_names_program_and_repeat(routed_unit_of_work: UowFactory) -> None:
    seed(
        routed_unit_of_work,
        Program(program_name="P-1001", repeat_id=2, archive_packet_id=77),
        Program(program_name="P-1002", repeat_id=1, archive_packet_id=78),
    )

    result = push_program_update(
        ProgramUpdatePush(event=make_event(), archive_packet_id=77),
        unit_of_work_factory=routed_unit_of_work,
    )

    assert result.status is ReconcileStatus.APPLIED
    [entry] = staged(routed_unit_of_work)
    assert entry.trans_type is TransType.PROGRAM_REVISION_ACCEPT
    assert (entry.program_name, entry.program_repeat, entry.district) == ("P-1001", 2, 1)


def test_missing_program_is_observable_no_op(
    routed_unit_of_work: UowFactory, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING):
        result = push_program_update(
            ProgramUpdatePush(event=make_event(), archive_packet_id=404),
            unit_of_work_factory=routed_unit_of_work,
        )

    assert result.status is ReconcileStatus.PROGRAM_NOT_FOUND
    assert result.is_lookup_miss is True
    assert staged(routed_unit_of_work) == []
    assert "404" in caplog.text
