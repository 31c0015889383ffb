"""Totals, averages and grouping over in-memory transaction snapshots.

Every function here is pure: it reads the records it is given and never
mutates them. Amounts are summed as ``Decimal`` starting from zero, so an
empty collection always totals ``Decimal(0)``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from decimal import Decimal

from pengluaran.models.transaction_type import TransactionType
from pengluaran.schemas.report import TransactionSummary
from pengluaran.schemas.transaction import TransactionResponse

UNCATEGORIZED = "uncategorized"

ZERO = Decimal(0)


def _sum_amounts(transactions: Iterable[TransactionResponse]) -> Decimal:
    return sum((t.amount for t in transactions), ZERO)


def total_by_type(
    transactions: Iterable[TransactionResponse], type_: TransactionType
) -> Decimal:
    return _sum_amounts(t for t in transactions if t.type == type_)


def count_by_type(
    transactions: Iterable[TransactionResponse], type_: TransactionType
) -> int:
    return sum(1 for t in transactions if t.type == type_)


def balance(transactions: Sequence[TransactionResponse]) -> Decimal:
    income = total_by_type(transactions, TransactionType.INCOME)
    expense = total_by_type(transactions, TransactionType.EXPENSE)
    return income - expense


def average(transactions: Sequence[TransactionResponse]) -> Decimal:
    if not transactions:
        return ZERO
    return _sum_amounts(transactions) / len(transactions)


def average_by_type(
    transactions: Sequence[TransactionResponse], type_: TransactionType
) -> Decimal:
    return average([t for t in transactions if t.type == type_])


def savings_rate(transactions: Sequence[TransactionResponse]) -> float:
    """Share of income left after expenses, in percent."""
    income = total_by_type(transactions, TransactionType.INCOME)
    if income == 0:
        return 0.0
    expense = total_by_type(transactions, TransactionType.EXPENSE)
    return float((income - expense) / income * 100)


def daily_average(transactions: Sequence[TransactionResponse], days: int) -> Decimal:
    """Average expense per day over a window of ``days`` days."""
    if days <= 0:
        return ZERO
    return total_by_type(transactions, TransactionType.EXPENSE) / days


def summarize(transactions: Sequence[TransactionResponse]) -> TransactionSummary:
    income = total_by_type(transactions, TransactionType.INCOME)
    expense = total_by_type(transactions, TransactionType.EXPENSE)
    return TransactionSummary(
        total_income=income,
        total_expense=expense,
        balance=income - expense,
        transaction_count=len(transactions),
        income_count=count_by_type(transactions, TransactionType.INCOME),
        expense_count=count_by_type(transactions, TransactionType.EXPENSE),
    )


def group_by_date(
    transactions: Iterable[TransactionResponse],
) -> dict[str, list[TransactionResponse]]:
    groups: dict[str, list[TransactionResponse]] = {}
    for t in transactions:
        groups.setdefault(t.date.isoformat(), []).append(t)
    return groups


def group_by_category(
    transactions: Iterable[TransactionResponse],
) -> dict[str, list[TransactionResponse]]:
    groups: dict[str, list[TransactionResponse]] = {}
    for t in transactions:
        key = str(t.category_id) if t.category_id is not None else UNCATEGORIZED
        groups.setdefault(key, []).append(t)
    return groups
