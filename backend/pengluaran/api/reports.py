from __future__ import annotations

import logging
from datetime import date
from enum import Enum

from fastapi import APIRouter, Depends, Query, Response

from pengluaran.api.deps import get_category_service, get_current_user, get_transaction_service
from pengluaran.config import settings
from pengluaran.models.user import User
from pengluaran.reporting import build_dashboard, build_report, export_filename, to_csv, to_json
from pengluaran.reporting.periods import start_date_for_range
from pengluaran.reporting.report import filter_since
from pengluaran.schemas.category import CategoryResponse
from pengluaran.schemas.report import DateRange
from pengluaran.schemas.transaction import TransactionResponse
from pengluaran.services.category_service import CategoryService
from pengluaran.services.transaction_service import TransactionService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reports", tags=["reports"])


class ExportFormat(str, Enum):
    CSV = "csv"
    JSON = "json"


async def _snapshot(
    user: User,
    transactions: TransactionService,
    categories: CategoryService,
) -> tuple[list[TransactionResponse], list[CategoryResponse]]:
    txns = await transactions.list_transactions(user)
    cats = await categories.list_categories(user)
    return (
        [TransactionResponse.model_validate(t) for t in txns],
        [CategoryResponse.model_validate(c) for c in cats],
    )


@router.get("", response_model=dict)
async def report(
    date_range: DateRange = Query(DateRange(settings.DEFAULT_DATE_RANGE), alias="range"),
    transactions: TransactionService = Depends(get_transaction_service),
    categories: CategoryService = Depends(get_category_service),
    current_user: User = Depends(get_current_user),
) -> dict:
    txns, cats = await _snapshot(current_user, transactions, categories)
    return {"data": build_report(txns, cats, date_range)}


@router.get("/dashboard", response_model=dict)
async def dashboard(
    transactions: TransactionService = Depends(get_transaction_service),
    categories: CategoryService = Depends(get_category_service),
    current_user: User = Depends(get_current_user),
) -> dict:
    txns, cats = await _snapshot(current_user, transactions, categories)
    return {"data": build_dashboard(txns, cats)}


@router.get("/export")
async def export(
    date_range: DateRange = Query(DateRange.ALL, alias="range"),
    format: ExportFormat = Query(ExportFormat.CSV),
    transactions: TransactionService = Depends(get_transaction_service),
    current_user: User = Depends(get_current_user),
) -> Response:
    today = date.today()
    snapshot = [
        TransactionResponse.model_validate(t)
        for t in await transactions.list_transactions(current_user)
    ]
    start = start_date_for_range(date_range, today, snapshot)
    selected = filter_since(snapshot, start)
    logger.info(
        "Exporting %d transactions as %s for user %s",
        len(selected),
        format.value,
        current_user.id,
    )

    if format == ExportFormat.JSON:
        content = to_json([t.model_dump(mode="json") for t in selected])
        media_type = "application/json"
    else:
        content = to_csv(selected)
        media_type = "text/csv; charset=utf-8"

    filename = export_filename(today, format.value)
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
