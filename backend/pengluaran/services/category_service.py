"""Category management service."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pengluaran.config import settings
from pengluaran.exceptions import CategoryLimitError, NotFoundError
from pengluaran.models.category import Category
from pengluaran.models.transaction import Transaction, TransactionType
from pengluaran.models.user import User
from pengluaran.schemas.category import CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_categories(
        self, user: User, type_: TransactionType | None = None
    ) -> list[Category]:
        stmt = select(Category).where(Category.user_id == user.id)
        if type_ is not None:
            stmt = stmt.where(Category.type == type_)
        result = await self.db.execute(stmt.order_by(Category.name))
        return list(result.scalars().all())

    async def get_category(self, user: User, category_id: uuid.UUID) -> Category:
        result = await self.db.execute(
            select(Category).where(
                Category.id == category_id, Category.user_id == user.id
            )
        )
        category = result.scalar_one_or_none()
        if category is None:
            raise NotFoundError("Category")
        return category

    async def create_category(self, user: User, data: CategoryCreate) -> Category:
        count = (
            await self.db.execute(
                select(func.count())
                .select_from(Category)
                .where(Category.user_id == user.id)
            )
        ).scalar() or 0
        if count >= settings.MAX_CATEGORIES_PER_USER:
            logger.warning(
                "User %s hit the category limit (%d)",
                user.id,
                settings.MAX_CATEGORIES_PER_USER,
            )
            raise CategoryLimitError(
                f"At most {settings.MAX_CATEGORIES_PER_USER} categories per user"
            )

        category = Category(user_id=user.id, **data.model_dump())
        self.db.add(category)
        await self.db.commit()
        await self.db.refresh(category)
        logger.info(
            "Created %s category %s for user %s", category.type.value, category.id, user.id
        )
        return category

    async def update_category(
        self, user: User, category_id: uuid.UUID, data: CategoryUpdate
    ) -> Category:
        category = await self.get_category(user, category_id)
        for field, value in data.model_dump(exclude_unset=True).items():
            if value is None and field != "icon":
                continue
            setattr(category, field, value)
        await self.db.commit()
        await self.db.refresh(category)
        logger.info("Updated category %s", category.id)
        return category

    async def delete_category(self, user: User, category_id: uuid.UUID) -> None:
        """Delete a category; its transactions become uncategorized."""
        category = await self.get_category(user, category_id)
        await self.db.execute(
            update(Transaction)
            .where(Transaction.category_id == category.id)
            .values(category_id=None)
            .execution_options(synchronize_session="fetch")
        )
        await self.db.delete(category)
        await self.db.commit()
        logger.info("Deleted category %s", category_id)
