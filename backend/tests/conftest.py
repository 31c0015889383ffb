from __future__ import annotations

import os

# Must be set before pengluaran.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from collections.abc import AsyncGenerator  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from pengluaran.database import Base, get_db  # noqa: E402
from pengluaran.main import app  # noqa: E402
from pengluaran.models import *  # noqa: E402, F401, F403
from pengluaran.models.user import User  # noqa: E402
from pengluaran.services.auth_service import create_access_token, hash_password  # noqa: E402

_test_db_url = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


@pytest.fixture()
async def async_db() -> AsyncGenerator[AsyncSession]:
    if _test_db_url.startswith("sqlite"):
        engine = create_async_engine(
            _test_db_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_async_engine(_test_db_url, echo=False)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with session_factory() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture()
async def client(async_db: AsyncSession) -> AsyncGenerator[httpx.AsyncClient]:
    async def _override_get_db() -> AsyncGenerator[AsyncSession]:
        yield async_db

    app.dependency_overrides[get_db] = _override_get_db

    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


async def _make_user(db: AsyncSession, username: str, email: str) -> User:
    user = User(
        username=username,
        email=email,
        hashed_password=hash_password("testpass"),
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


@pytest.fixture()
async def current_user(async_db: AsyncSession) -> User:
    return await _make_user(async_db, "testuser", "test@test.com")


@pytest.fixture()
async def auth_token(current_user: User) -> str:
    return create_access_token(current_user.id)


@pytest.fixture()
def auth_headers(auth_token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture()
async def other_headers(async_db: AsyncSession) -> dict[str, str]:
    other = await _make_user(async_db, "otheruser", "other@test.com")
    return {"Authorization": f"Bearer {create_access_token(other.id)}"}

