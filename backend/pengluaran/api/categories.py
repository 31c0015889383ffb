from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, status

from pengluaran.api.deps import get_category_service, get_current_user, get_transaction_service
from pengluaran.exceptions import CategoryLimitError, NotFoundError
from pengluaran.models.transaction import TransactionType
from pengluaran.models.user import User
from pengluaran.reporting import category_usage
from pengluaran.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from pengluaran.schemas.transaction import TransactionResponse
from pengluaran.services.category_service import CategoryService
from pengluaran.services.transaction_service import TransactionService

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=dict)
async def list_categories(
    type_: TransactionType | None = Query(None, alias="type"),
    service: CategoryService = Depends(get_category_service),
    current_user: User = Depends(get_current_user),
) -> dict:
    categories = await service.list_categories(current_user, type_)
    return {
        "data": [CategoryResponse.model_validate(c) for c in categories],
        "total": len(categories),
    }


@router.get("/usage", response_model=dict)
async def usage(
    service: CategoryService = Depends(get_category_service),
    transactions: TransactionService = Depends(get_transaction_service),
    current_user: User = Depends(get_current_user),
) -> dict:
    categories = [
        CategoryResponse.model_validate(c)
        for c in await service.list_categories(current_user)
    ]
    txns = [
        TransactionResponse.model_validate(t)
        for t in await transactions.list_transactions(current_user)
    ]
    return {"data": category_usage(categories, txns)}


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
async def create_category(
    body: CategoryCreate,
    service: CategoryService = Depends(get_category_service),
    current_user: User = Depends(get_current_user),
) -> dict:
    try:
        category = await service.create_category(current_user, body)
    except CategoryLimitError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    return {"data": CategoryResponse.model_validate(category)}


@router.patch("/{category_id}", response_model=dict)
async def update_category(
    category_id: uuid.UUID,
    body: CategoryUpdate,
    service: CategoryService = Depends(get_category_service),
    current_user: User = Depends(get_current_user),
) -> dict:
    try:
        category = await service.update_category(current_user, category_id, body)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return {"data": CategoryResponse.model_validate(category)}


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: uuid.UUID,
    service: CategoryService = Depends(get_category_service),
    current_user: User = Depends(get_current_user),
) -> None:
    try:
        await service.delete_category(current_user, category_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
