"""In-memory records for exercising the reporting functions."""

from __future__ import annotations

import uuid
from datetime import date
from decimal import Decimal

from pengluaran.models.transaction_type import TransactionType
from pengluaran.schemas.category import CategoryResponse
from pengluaran.schemas.transaction import TransactionResponse

OWNER_ID = uuid.UUID("00000000-0000-0000-0000-000000000001")

INCOME = TransactionType.INCOME
EXPENSE = TransactionType.EXPENSE


def make_category(
    name: str,
    type_: TransactionType = EXPENSE,
    color: str = "#ef4444",
    icon: str | None = None,
) -> CategoryResponse:
    return CategoryResponse(
        id=uuid.uuid4(),
        user_id=OWNER_ID,
        name=name,
        type=type_,
        color=color,
        icon=icon,
    )


def make_txn(
    type_: TransactionType,
    amount: str | int,
    on: str | date,
    category: CategoryResponse | None = None,
    description: str | None = None,
) -> TransactionResponse:
    return TransactionResponse(
        id=uuid.uuid4(),
        user_id=OWNER_ID,
        type=type_,
        amount=Decimal(str(amount)),
        date=date.fromisoformat(on) if isinstance(on, str) else on,
        category_id=category.id if category is not None else None,
        category=category,
        description=description,
    )
