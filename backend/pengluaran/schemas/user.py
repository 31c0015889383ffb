from __future__ import annotations

import uuid
from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field

from pengluaran.reporting.formatting import CURRENCY_SYMBOLS


def _check_currency(value: str) -> str:
    value = value.upper()
    if value not in CURRENCY_SYMBOLS:
        raise ValueError(f"Unsupported currency '{value}'")
    return value


CurrencyCode = Annotated[str, AfterValidator(_check_currency)]


class UserCreate(BaseModel):
    username: str = Field(min_length=1, max_length=50)
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(min_length=6)
    full_name: str | None = Field(None, max_length=255)
    currency: CurrencyCode | None = None


class UserLogin(BaseModel):
    username: str
    password: str


class ProfileUpdate(BaseModel):
    full_name: str | None = Field(None, max_length=255)
    currency: CurrencyCode | None = None


class UserResponse(BaseModel):
    id: uuid.UUID
    username: str
    email: str
    full_name: str | None
    currency: str
    is_active: bool
    is_admin: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
