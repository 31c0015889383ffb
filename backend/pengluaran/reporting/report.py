"""Report and dashboard composites built from the aggregation functions."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date

from pengluaran.models.transaction_type import TransactionType
from pengluaran.reporting.aggregation import (
    average,
    average_by_type,
    daily_average,
    savings_rate,
    summarize,
)
from pengluaran.reporting.breakdown import category_breakdown
from pengluaran.reporting.periods import (
    days_in_month,
    month_end,
    month_start,
    months_in_range,
    start_date_for_range,
)
from pengluaran.reporting.timeseries import build_time_series
from pengluaran.schemas.category import CategoryResponse
from pengluaran.schemas.report import (
    DATE_RANGE_LABELS,
    Dashboard,
    DateRange,
    Granularity,
    Report,
)
from pengluaran.schemas.transaction import TransactionResponse

logger = logging.getLogger(__name__)

RECENT_TRANSACTIONS = 5


def filter_since(
    transactions: Sequence[TransactionResponse], start: date
) -> list[TransactionResponse]:
    return [t for t in transactions if t.date >= start]


def build_report(
    transactions: Sequence[TransactionResponse],
    categories: Sequence[CategoryResponse],
    date_range: DateRange,
    today: date | None = None,
) -> Report:
    today = today or date.today()
    start = start_date_for_range(date_range, today, transactions)
    subset = filter_since(transactions, start)
    logger.debug(
        "Report %s from %s: %d of %d transactions",
        date_range.value,
        start,
        len(subset),
        len(transactions),
    )

    return Report(
        date_range=date_range,
        range_label=DATE_RANGE_LABELS[date_range],
        start_date=start,
        end_date=today,
        summary=summarize(subset),
        average_income=average_by_type(subset, TransactionType.INCOME),
        average_expense=average_by_type(subset, TransactionType.EXPENSE),
        average_transaction=average(subset),
        savings_rate=savings_rate(subset),
        daily_average_expense=daily_average(subset, (today - start).days + 1),
        monthly=build_time_series(
            subset, months_in_range(start, today), Granularity.MONTH
        ),
        income_by_category=category_breakdown(
            subset, categories, TransactionType.INCOME
        ),
        expense_by_category=category_breakdown(
            subset, categories, TransactionType.EXPENSE
        ),
    )


def build_dashboard(
    transactions: Sequence[TransactionResponse],
    categories: Sequence[CategoryResponse],
    today: date | None = None,
) -> Dashboard:
    """Current-month overview: totals, a daily series and top expenses."""
    today = today or date.today()
    start, end = month_start(today), month_end(today)
    this_month = [t for t in transactions if start <= t.date <= end]
    recent = sorted(this_month, key=lambda t: t.date, reverse=True)

    return Dashboard(
        month_start=start,
        month_end=end,
        summary=summarize(this_month),
        daily=build_time_series(this_month, days_in_month(today), Granularity.DAY),
        expense_by_category=category_breakdown(
            this_month, categories, TransactionType.EXPENSE
        ),
        recent_transactions=recent[:RECENT_TRANSACTIONS],
    )
