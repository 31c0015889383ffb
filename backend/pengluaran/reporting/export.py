"""CSV and JSON export of transaction lists."""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Iterable
from datetime import date
from typing import Any

from pengluaran.models.transaction_type import TransactionType
from pengluaran.reporting.formatting import format_amount
from pengluaran.schemas.transaction import TransactionResponse

CSV_HEADER = ("Tanggal", "Tipe", "Kategori", "Jumlah", "Deskripsi")

TYPE_LABELS: dict[TransactionType, str] = {
    TransactionType.INCOME: "Pemasukan",
    TransactionType.EXPENSE: "Pengeluaran",
}

UNCATEGORIZED_LABEL = "Tanpa Kategori"


def _row(t: TransactionResponse) -> tuple[str, ...]:
    return (
        t.date.isoformat(),
        TYPE_LABELS[t.type],
        t.category.name if t.category is not None else UNCATEGORIZED_LABEL,
        format_amount(t.amount),
        t.description or "",
    )


def to_csv(transactions: Iterable[TransactionResponse]) -> str:
    """Render transactions as CSV text, one row each after the header.

    Fields are quoted only when they contain a comma, a double quote or a
    line break, and embedded quotes are doubled. Rows are separated by
    ``\\n`` with no newline after the last one.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for t in transactions:
        writer.writerow(_row(t))
    return buffer.getvalue().removesuffix("\n")


def to_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)


def export_filename(today: date, extension: str = "csv") -> str:
    return f"laporan-keuangan-{today.isoformat()}.{extension}"
