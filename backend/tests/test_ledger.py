from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from factories import EXPENSE, INCOME, make_txn

from pengluaran.reporting.ledger import ConfirmedWrite, WriteKind, apply_confirmed_write

T0 = datetime(2025, 1, 1, 12, 0, 0)


def _stamped(txn, at):
    return txn.model_copy(update={"updated_at": at})


def test_created_record_goes_first():
    old = _stamped(make_txn(EXPENSE, 10, "2025-01-01"), T0)
    new = _stamped(make_txn(INCOME, 50, "2025-01-02"), T0)

    result = apply_confirmed_write([old], ConfirmedWrite(WriteKind.CREATED, record=new))

    assert [t.id for t in result] == [new.id, old.id]


def test_update_replaces_in_place():
    a = _stamped(make_txn(EXPENSE, 10, "2025-01-01"), T0)
    b = _stamped(make_txn(EXPENSE, 20, "2025-01-02"), T0)
    edited = b.model_copy(update={"amount": 25, "updated_at": T0 + timedelta(minutes=1)})

    snapshot = [a, b]
    result = apply_confirmed_write(snapshot, ConfirmedWrite(WriteKind.UPDATED, record=edited))

    assert [t.id for t in result] == [a.id, b.id]
    assert result[1].amount == 25
    # the original list is untouched
    assert snapshot[1].amount == 20


def test_stale_update_loses_to_newer_cache():
    cached = _stamped(make_txn(EXPENSE, 20, "2025-01-02"), T0 + timedelta(hours=1))
    stale = cached.model_copy(update={"amount": 99, "updated_at": T0})

    result = apply_confirmed_write([cached], ConfirmedWrite(WriteKind.UPDATED, record=stale))

    assert result[0].amount == 20


def test_update_for_unknown_record_inserts_it():
    a = _stamped(make_txn(EXPENSE, 10, "2025-01-01"), T0)
    other = _stamped(make_txn(INCOME, 5, "2025-01-03"), T0)

    result = apply_confirmed_write([a], ConfirmedWrite(WriteKind.UPDATED, record=other))

    assert [t.id for t in result] == [other.id, a.id]


def test_delete_removes_by_id():
    a = make_txn(EXPENSE, 10, "2025-01-01")
    b = make_txn(EXPENSE, 20, "2025-01-02")

    result = apply_confirmed_write([a, b], ConfirmedWrite(WriteKind.DELETED, record_id=a.id))
    assert result == [b]

    unchanged = apply_confirmed_write(result, ConfirmedWrite(WriteKind.DELETED, record_id=a.id))
    assert unchanged == [b]


def test_write_without_target_is_rejected():
    with pytest.raises(ValueError):
        apply_confirmed_write([], ConfirmedWrite(WriteKind.DELETED))


def test_naive_and_aware_timestamps_compare_as_utc():
    cached = _stamped(make_txn(EXPENSE, 20, "2025-01-02"), T0)
    newer = cached.model_copy(
        update={"amount": 30, "updated_at": T0.replace(tzinfo=UTC) + timedelta(seconds=1)}
    )
    older = cached.model_copy(
        update={"amount": 10, "updated_at": T0.replace(tzinfo=UTC) - timedelta(seconds=1)}
    )

    assert apply_confirmed_write([cached], ConfirmedWrite(WriteKind.UPDATED, record=newer))[0].amount == 30
    assert apply_confirmed_write([cached], ConfirmedWrite(WriteKind.UPDATED, record=older))[0].amount == 20
