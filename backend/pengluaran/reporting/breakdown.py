"""Per-category shares of income or expense."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pengluaran.models.transaction_type import TransactionType
from pengluaran.reporting.aggregation import ZERO, total_by_type
from pengluaran.schemas.category import CategoryResponse, CategoryUsage
from pengluaran.schemas.report import CategorySummary
from pengluaran.schemas.transaction import TransactionResponse

logger = logging.getLogger(__name__)


def category_breakdown(
    transactions: Sequence[TransactionResponse],
    categories: Sequence[CategoryResponse],
    type_: TransactionType,
) -> list[CategorySummary]:
    """Amount, count and percentage of the ``type_`` total for each category.

    Only categories of the same type are considered, so an expense is never
    attributed to an income category even when it is tagged with one. The
    percentage denominator is the full total for the type, uncategorized
    transactions included, which is why percentages may sum to less than 100.
    Categories with nothing spent are dropped and the rest are ordered by
    amount, largest first; ties keep their input order.
    """
    of_type = [t for t in transactions if t.type == type_]
    total_amount = total_by_type(transactions, type_)

    rows = []
    for category in categories:
        if category.type != type_:
            continue
        matching = [t for t in of_type if t.category_id == category.id]
        amount = sum((t.amount for t in matching), ZERO)
        if amount <= 0:
            continue
        percentage = float(amount / total_amount * 100) if total_amount > 0 else 0.0
        rows.append(
            CategorySummary(
                category=category,
                amount=amount,
                count=len(matching),
                percentage=percentage,
            )
        )

    # sorted() is stable
    rows = sorted(rows, key=lambda r: r.amount, reverse=True)
    logger.debug("Built %s breakdown with %d categories", type_.value, len(rows))
    return rows


def top_spending_categories(
    transactions: Sequence[TransactionResponse],
    categories: Sequence[CategoryResponse],
    limit: int = 5,
) -> list[CategorySummary]:
    return category_breakdown(transactions, categories, TransactionType.EXPENSE)[:limit]


def category_usage(
    categories: Sequence[CategoryResponse],
    transactions: Sequence[TransactionResponse],
) -> list[CategoryUsage]:
    """Transaction count and total per category, unused categories included."""
    usage = []
    for category in categories:
        matching = [t for t in transactions if t.category_id == category.id]
        usage.append(
            CategoryUsage(
                category=category,
                transaction_count=len(matching),
                total_amount=sum((t.amount for t in matching), ZERO),
            )
        )
    return usage
