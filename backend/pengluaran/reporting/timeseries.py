"""Chart-ready income/expense series over day or month periods."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from pengluaran.models.transaction_type import TransactionType
from pengluaran.reporting.aggregation import total_by_type
from pengluaran.reporting.formatting import day_label, month_label
from pengluaran.reporting.periods import month_end, month_start
from pengluaran.schemas.report import Granularity, PeriodBucket
from pengluaran.schemas.transaction import TransactionResponse


def period_bounds(anchor: date, granularity: Granularity) -> tuple[date, date]:
    if granularity == Granularity.DAY:
        return anchor, anchor
    return month_start(anchor), month_end(anchor)


def build_time_series(
    transactions: Sequence[TransactionResponse],
    anchors: Sequence[date],
    granularity: Granularity = Granularity.MONTH,
) -> list[PeriodBucket]:
    """One bucket per anchor, in the order the anchors were given.

    Anchors are not sorted or de-duplicated. A period with no transactions
    still yields a bucket, with zero income, expense and balance.
    """
    label = day_label if granularity == Granularity.DAY else month_label
    buckets = []
    for anchor in anchors:
        start, end = period_bounds(anchor, granularity)
        in_period = [t for t in transactions if start <= t.date <= end]
        income = total_by_type(in_period, TransactionType.INCOME)
        expense = total_by_type(in_period, TransactionType.EXPENSE)
        buckets.append(
            PeriodBucket(
                period=anchor,
                label=label(anchor),
                start=start,
                end=end,
                income=income,
                expense=expense,
                balance=income - expense,
                transaction_count=len(in_period),
            )
        )
    return buckets
