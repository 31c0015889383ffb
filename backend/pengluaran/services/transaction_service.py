"""Transaction data access, scoped to the owning user."""

from __future__ import annotations

import logging
import uuid
from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from pengluaran.exceptions import CategoryMismatchError, NotFoundError
from pengluaran.models.category import Category
from pengluaran.models.transaction import Transaction, TransactionType
from pengluaran.models.user import User
from pengluaran.reporting.periods import month_start
from pengluaran.schemas.transaction import TransactionCreate, TransactionUpdate

logger = logging.getLogger(__name__)

_NULLABLE_FIELDS = {"category_id", "description"}


class TransactionService:
    def __init__(self, db: AsyncSession):
        self.db = db

    def _filters(
        self,
        user: User,
        type_: TransactionType | None = None,
        category_id: uuid.UUID | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list:
        clauses = [Transaction.user_id == user.id]
        if type_ is not None:
            clauses.append(Transaction.type == type_)
        if category_id is not None:
            clauses.append(Transaction.category_id == category_id)
        if date_from is not None:
            clauses.append(Transaction.date >= date_from)
        if date_to is not None:
            clauses.append(Transaction.date <= date_to)
        return clauses

    async def list_transactions(
        self,
        user: User,
        type_: TransactionType | None = None,
        category_id: uuid.UUID | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[Transaction]:
        """Newest first, with the category joined in."""
        clauses = self._filters(user, type_, category_id, date_from, date_to)
        result = await self.db.execute(
            select(Transaction)
            .options(selectinload(Transaction.category))
            .where(*clauses)
            .order_by(Transaction.date.desc(), Transaction.created_at.desc())
        )
        return list(result.scalars().all())

    async def current_month(self, user: User, today: date | None = None) -> list[Transaction]:
        today = today or date.today()
        return await self.list_transactions(user, date_from=month_start(today))

    async def get_transaction(
        self, user: User, transaction_id: uuid.UUID
    ) -> Transaction:
        result = await self.db.execute(
            select(Transaction)
            .options(selectinload(Transaction.category))
            .where(Transaction.id == transaction_id, Transaction.user_id == user.id)
            .execution_options(populate_existing=True)
        )
        txn = result.scalar_one_or_none()
        if txn is None:
            raise NotFoundError("Transaction")
        return txn

    async def _check_category(
        self, user: User, category_id: uuid.UUID | None, type_: TransactionType
    ) -> None:
        if category_id is None:
            return
        result = await self.db.execute(
            select(Category).where(
                Category.id == category_id, Category.user_id == user.id
            )
        )
        category = result.scalar_one_or_none()
        if category is None:
            raise NotFoundError("Category")
        if category.type != type_:
            logger.warning(
                "Rejected %s transaction tagged with %s category %s",
                type_.value,
                category.type.value,
                category.id,
            )
            raise CategoryMismatchError(
                f"Category '{category.name}' is for {category.type.value} transactions"
            )

    async def create_transaction(
        self, user: User, data: TransactionCreate
    ) -> Transaction:
        await self._check_category(user, data.category_id, data.type)
        txn = Transaction(user_id=user.id, **data.model_dump())
        self.db.add(txn)
        await self.db.commit()
        logger.info(
            "Created %s transaction %s for user %s", txn.type.value, txn.id, user.id
        )
        return await self.get_transaction(user, txn.id)

    async def update_transaction(
        self, user: User, transaction_id: uuid.UUID, data: TransactionUpdate
    ) -> Transaction:
        txn = await self.get_transaction(user, transaction_id)
        changes = {
            field: value
            for field, value in data.model_dump(exclude_unset=True).items()
            if value is not None or field in _NULLABLE_FIELDS
        }
        await self._check_category(
            user,
            changes.get("category_id", txn.category_id),
            changes.get("type") or txn.type,
        )
        for field, value in changes.items():
            setattr(txn, field, value)
        await self.db.commit()
        logger.info("Updated transaction %s", txn.id)
        return await self.get_transaction(user, txn.id)

    async def delete_transaction(self, user: User, transaction_id: uuid.UUID) -> None:
        txn = await self.get_transaction(user, transaction_id)
        await self.db.delete(txn)
        await self.db.commit()
        logger.info("Deleted transaction %s", transaction_id)
