"""Pure aggregation and reporting over transaction and category snapshots."""

from pengluaran.reporting.aggregation import (
    UNCATEGORIZED,
    average,
    average_by_type,
    balance,
    count_by_type,
    daily_average,
    group_by_category,
    group_by_date,
    savings_rate,
    summarize,
    total_by_type,
)
from pengluaran.reporting.breakdown import (
    category_breakdown,
    category_usage,
    top_spending_categories,
)
from pengluaran.reporting.export import export_filename, to_csv, to_json
from pengluaran.reporting.report import build_dashboard, build_report
from pengluaran.reporting.timeseries import build_time_series

__all__ = [
    "UNCATEGORIZED",
    "average",
    "average_by_type",
    "balance",
    "build_dashboard",
    "build_report",
    "build_time_series",
    "category_breakdown",
    "category_usage",
    "count_by_type",
    "daily_average",
    "export_filename",
    "group_by_category",
    "group_by_date",
    "savings_rate",
    "summarize",
    "to_csv",
    "to_json",
    "top_spending_categories",
    "total_by_type",
]
