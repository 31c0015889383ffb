from __future__ import annotations

from pengluaran.models.category import Category
from pengluaran.models.transaction import Transaction, TransactionType
from pengluaran.models.user import User

__all__ = [
    "Category",
    "Transaction",
    "TransactionType",
    "User",
]
