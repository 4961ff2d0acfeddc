import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("DB_RETRY_DELAY", "0")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from roomsplit.db.session import Base, get_db
from roomsplit.main import app
from roomsplit.schemas.expense import Expense, Split
from roomsplit.schemas.room import Member


def make_expense(expense_id, payer_id, amount, splits, split_type="equal"):
    """splits: {user_id: amount}"""
    return Expense(
        id=expense_id,
        title=f"Expense {expense_id}",
        amount=amount,
        paid_by=Member(id=payer_id, name=payer_id) if payer_id else None,
        split_type=split_type,
        splits=[Split(user_id=u, amount=a) for u, a in splits.items()],
    )


def member_headers(member_id, name=None):
    headers = {"X-Member-Id": member_id}
    if name:
        headers["X-Member-Name"] = name
    return headers


@pytest.fixture
async def db_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def client(db_engine):
    test_session = sessionmaker(bind=db_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with test_session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
