from __future__ import annotations

import datetime as dt
import uuid
from decimal import Decimal

from pydantic import BaseModel, Field

from pengluaran.models.transaction_type import TransactionType
from pengluaran.schemas.category import CategoryResponse


class TransactionCreate(BaseModel):
    type: TransactionType
    amount: Decimal = Field(gt=0, max_digits=14, decimal_places=2)
    category_id: uuid.UUID | None = None
    description: str | None = Field(None, max_length=500)
    date: dt.date


class TransactionUpdate(BaseModel):
    type: TransactionType | None = None
    amount: Decimal | None = Field(None, gt=0, max_digits=14, decimal_places=2)
    category_id: uuid.UUID | None = None
    description: str | None = Field(None, max_length=500)
    date: dt.date | None = None


class TransactionResponse(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    type: TransactionType
    amount: Decimal = Field(ge=0)
    date: dt.date
    category_id: uuid.UUID | None = None
    description: str | None = None
    category: CategoryResponse | None = None
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None

    model_config = {"from_attributes": True}


class TransactionListResponse(BaseModel):
    data: list[TransactionResponse]
    total: int
