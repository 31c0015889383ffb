from __future__ import annotations

import datetime as dt
import enum
from decimal import Decimal

from pydantic import BaseModel

from pengluaran.schemas.category import CategoryResponse
from pengluaran.schemas.transaction import TransactionResponse


class DateRange(str, enum.Enum):
    ONE_MONTH = "1M"
    THREE_MONTHS = "3M"
    SIX_MONTHS = "6M"
    ONE_YEAR = "1Y"
    ALL = "ALL"


DATE_RANGE_LABELS: dict[DateRange, str] = {
    DateRange.ONE_MONTH: "1 Bulan",
    DateRange.THREE_MONTHS: "3 Bulan",
    DateRange.SIX_MONTHS: "6 Bulan",
    DateRange.ONE_YEAR: "1 Tahun",
    DateRange.ALL: "Semua",
}


class Granularity(str, enum.Enum):
    DAY = "day"
    MONTH = "month"


class TransactionSummary(BaseModel):
    total_income: Decimal
    total_expense: Decimal
    balance: Decimal
    transaction_count: int
    income_count: int = 0
    expense_count: int = 0


class CategorySummary(BaseModel):
    category: CategoryResponse
    amount: Decimal
    count: int
    percentage: float


class PeriodBucket(BaseModel):
    period: dt.date
    label: str
    start: dt.date
    end: dt.date
    income: Decimal
    expense: Decimal
    balance: Decimal
    transaction_count: int


class Report(BaseModel):
    date_range: DateRange
    range_label: str
    start_date: dt.date
    end_date: dt.date
    summary: TransactionSummary
    average_income: Decimal
    average_expense: Decimal
    average_transaction: Decimal
    savings_rate: float
    daily_average_expense: Decimal
    monthly: list[PeriodBucket]
    income_by_category: list[CategorySummary]
    expense_by_category: list[CategorySummary]


class Dashboard(BaseModel):
    month_start: dt.date
    month_end: dt.date
    summary: TransactionSummary
    daily: list[PeriodBucket]
    expense_by_category: list[CategorySummary]
    recent_transactions: list[TransactionResponse]
