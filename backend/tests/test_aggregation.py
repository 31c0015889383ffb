from __future__ import annotations

from decimal import Decimal

from factories import EXPENSE, INCOME, make_category, make_txn

from pengluaran.reporting import (
    UNCATEGORIZED,
    average,
    average_by_type,
    balance,
    daily_average,
    group_by_category,
    group_by_date,
    savings_rate,
    summarize,
    total_by_type,
)


def _sample():
    return [
        make_txn(INCOME, 100, "2025-01-05"),
        make_txn(EXPENSE, 40, "2025-01-05"),
        make_txn(EXPENSE, 20, "2025-02-01"),
    ]


def test_totals_and_balance():
    txns = _sample()
    assert total_by_type(txns, INCOME) == Decimal("100")
    assert total_by_type(txns, EXPENSE) == Decimal("60")
    assert balance(txns) == Decimal("40")
    assert balance(txns) == total_by_type(txns, INCOME) - total_by_type(txns, EXPENSE)


def test_empty_collection_is_zero():
    assert total_by_type([], INCOME) == 0
    assert balance([]) == 0
    assert average([]) == 0
    assert average_by_type([], EXPENSE) == 0
    assert savings_rate([]) == 0.0


def test_average():
    txns = _sample()
    assert average(txns) == Decimal("160") / 3
    assert average_by_type(txns, EXPENSE) == Decimal("30")


def test_negative_balance():
    txns = [make_txn(INCOME, "10.50", "2025-03-01"), make_txn(EXPENSE, "25.25", "2025-03-02")]
    assert balance(txns) == Decimal("-14.75")


def test_savings_rate():
    txns = _sample()
    assert savings_rate(txns) == 40.0
    assert savings_rate([make_txn(EXPENSE, 5, "2025-01-01")]) == 0.0


def test_daily_average():
    txns = _sample()
    assert daily_average(txns, 30) == Decimal("2")
    assert daily_average(txns, 0) == 0


def test_summarize_counts():
    summary = summarize(_sample())
    assert summary.total_income == Decimal("100")
    assert summary.total_expense == Decimal("60")
    assert summary.balance == Decimal("40")
    assert summary.transaction_count == 3
    assert summary.income_count == 1
    assert summary.expense_count == 2


def test_group_by_date_partitions_input():
    txns = _sample()
    groups = group_by_date(txns)
    assert set(groups) == {"2025-01-05", "2025-02-01"}
    assert len(groups["2025-01-05"]) == 2
    assert len(groups["2025-02-01"]) == 1
    # insertion order kept within a group
    assert groups["2025-01-05"] == [txns[0], txns[1]]

    regrouped = [t.id for group in groups.values() for t in group]
    assert sorted(regrouped) == sorted(t.id for t in txns)


def test_group_by_category_uses_sentinel():
    food = make_category("Food")
    txns = [
        make_txn(EXPENSE, 40, "2025-01-05", category=food),
        make_txn(EXPENSE, 20, "2025-02-01"),
        make_txn(EXPENSE, 5, "2025-02-03", category=food),
    ]
    groups = group_by_category(txns)
    assert set(groups) == {str(food.id), UNCATEGORIZED}
    assert [t.amount for t in groups[str(food.id)]] == [Decimal("40"), Decimal("5")]
    assert len(groups[UNCATEGORIZED]) == 1


def test_functions_do_not_mutate_input():
    txns = _sample()
    before = [t.model_dump() for t in txns]
    first = (balance(txns), average(txns), group_by_date(txns))
    second = (balance(txns), average(txns), group_by_date(txns))
    assert first == second
    assert [t.model_dump() for t in txns] == before
