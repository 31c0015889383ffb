from __future__ import annotations

import enum


class TransactionType(str, enum.Enum):
    INCOME = "income"
    EXPENSE = "expense"
