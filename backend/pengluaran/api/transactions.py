from __future__ import annotations

import uuid
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status

from pengluaran.api.deps import get_current_user, get_transaction_service
from pengluaran.exceptions import CategoryMismatchError, NotFoundError
from pengluaran.models.transaction import TransactionType
from pengluaran.models.user import User
from pengluaran.reporting import summarize
from pengluaran.schemas.transaction import (
    TransactionCreate,
    TransactionListResponse,
    TransactionResponse,
    TransactionUpdate,
)
from pengluaran.services.transaction_service import TransactionService

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("", response_model=TransactionListResponse)
async def list_transactions(
    type_: TransactionType | None = Query(None, alias="type"),
    category_id: uuid.UUID | None = None,
    date_from: date | None = None,
    date_to: date | None = None,
    service: TransactionService = Depends(get_transaction_service),
    current_user: User = Depends(get_current_user),
) -> dict:
    transactions = await service.list_transactions(
        current_user,
        type_=type_,
        category_id=category_id,
        date_from=date_from,
        date_to=date_to,
    )
    return {
        "data": [TransactionResponse.model_validate(t) for t in transactions],
        "total": len(transactions),
    }


@router.get("/current-month", response_model=TransactionListResponse)
async def current_month(
    service: TransactionService = Depends(get_transaction_service),
    current_user: User = Depends(get_current_user),
) -> dict:
    transactions = await service.current_month(current_user)
    return {
        "data": [TransactionResponse.model_validate(t) for t in transactions],
        "total": len(transactions),
    }


@router.get("/stats", response_model=dict)
async def stats(
    date_from: date | None = None,
    date_to: date | None = None,
    service: TransactionService = Depends(get_transaction_service),
    current_user: User = Depends(get_current_user),
) -> dict:
    transactions = await service.list_transactions(
        current_user, date_from=date_from, date_to=date_to
    )
    snapshot = [TransactionResponse.model_validate(t) for t in transactions]
    return {"data": summarize(snapshot)}


@router.get("/{transaction_id}", response_model=dict)
async def get_transaction(
    transaction_id: uuid.UUID,
    service: TransactionService = Depends(get_transaction_service),
    current_user: User = Depends(get_current_user),
) -> dict:
    try:
        txn = await service.get_transaction(current_user, transaction_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return {"data": TransactionResponse.model_validate(txn)}


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    body: TransactionCreate,
    service: TransactionService = Depends(get_transaction_service),
    current_user: User = Depends(get_current_user),
) -> dict:
    try:
        txn = await service.create_transaction(current_user, body)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except CategoryMismatchError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return {"data": TransactionResponse.model_validate(txn)}


@router.patch("/{transaction_id}", response_model=dict)
async def update_transaction(
    transaction_id: uuid.UUID,
    body: TransactionUpdate,
    service: TransactionService = Depends(get_transaction_service),
    current_user: User = Depends(get_current_user),
) -> dict:
    try:
        txn = await service.update_transaction(current_user, transaction_id, body)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except CategoryMismatchError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return {"data": TransactionResponse.model_validate(txn)}


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_transaction(
    transaction_id: uuid.UUID,
    service: TransactionService = Depends(get_transaction_service),
    current_user: User = Depends(get_current_user),
) -> None:
    try:
        await service.delete_transaction(current_user, transaction_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
