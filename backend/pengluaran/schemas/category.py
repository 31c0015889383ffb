from __future__ import annotations

import re
import uuid
from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field, computed_field

from pengluaran.icons import ICON_ASSETS, CategoryIcon, resolve_icon
from pengluaran.models.transaction_type import TransactionType

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")
DEFAULT_COLOR = "#64748b"


def _check_color(value: str) -> str:
    if not _HEX_COLOR.match(value):
        raise ValueError("Color must be a #rrggbb hex string")
    return value.lower()


def _check_icon(value: str) -> str:
    return resolve_icon(value).value


HexColor = Annotated[str, AfterValidator(_check_color)]
IconName = Annotated[str, AfterValidator(_check_icon)]


class CategoryCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    type: TransactionType
    icon: IconName | None = None
    color: HexColor = DEFAULT_COLOR


class CategoryUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    type: TransactionType | None = None
    icon: IconName | None = None
    color: HexColor | None = None


class CategoryResponse(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    name: str
    type: TransactionType
    icon: str | None = None
    color: str = DEFAULT_COLOR
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def icon_asset(self) -> str | None:
        # stored values are not re-validated on read
        try:
            return ICON_ASSETS[CategoryIcon(self.icon)]
        except ValueError:
            return None


class CategoryUsage(BaseModel):
    category: CategoryResponse
    transaction_count: int
    total_amount: Decimal
