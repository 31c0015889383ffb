"""Calendar helpers for period boundaries and lookback windows."""

from __future__ import annotations

import calendar
from collections.abc import Sequence
from datetime import date, timedelta

from pengluaran.schemas.report import DateRange
from pengluaran.schemas.transaction import TransactionResponse

RANGE_MONTHS: dict[DateRange, int] = {
    DateRange.ONE_MONTH: 1,
    DateRange.THREE_MONTHS: 3,
    DateRange.SIX_MONTHS: 6,
    DateRange.ONE_YEAR: 12,
}


def month_start(d: date) -> date:
    return d.replace(day=1)


def month_end(d: date) -> date:
    return d.replace(day=calendar.monthrange(d.year, d.month)[1])


def sub_months(d: date, months: int) -> date:
    """Shift ``d`` back by whole months, clamping to the target month's length.

    ``sub_months(date(2025, 3, 31), 1)`` is ``date(2025, 2, 28)``.
    """
    index = d.year * 12 + (d.month - 1) - months
    year, month = divmod(index, 12)
    month += 1
    day = min(d.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def months_in_range(start: date, end: date) -> list[date]:
    """First day of every month from ``start``'s month to ``end``'s, inclusive."""
    months = []
    current = month_start(start)
    last = month_start(end)
    while current <= last:
        months.append(current)
        current = month_end(current) + timedelta(days=1)
    return months


def days_in_range(start: date, end: date) -> list[date]:
    return [start + timedelta(days=n) for n in range((end - start).days + 1)]


def days_in_month(d: date) -> list[date]:
    return days_in_range(month_start(d), month_end(d))


def start_date_for_range(
    date_range: DateRange,
    today: date,
    transactions: Sequence[TransactionResponse] = (),
) -> date:
    """Earliest date included by a lookback window ending ``today``.

    ``ALL`` starts at the oldest transaction; with no transactions it
    collapses to ``today``.
    """
    if date_range == DateRange.ALL:
        if not transactions:
            return today
        return min(t.date for t in transactions)
    return sub_months(today, RANGE_MONTHS[date_range])
