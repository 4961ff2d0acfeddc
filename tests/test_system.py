import pytest
from sqlalchemy.ext.asyncio import create_async_engine

from roomsplit.core import db_check
from roomsplit.core.db_check import wait_for_db


async def test_wait_for_db_connects():
    await wait_for_db(retries=1, delay=0)


async def test_wait_for_db_gives_up(monkeypatch):
    broken = create_async_engine("sqlite+aiosqlite:////nonexistent-dir/roomsplit.db")
    monkeypatch.setattr(db_check, "engine", broken)

    with pytest.raises(RuntimeError, match="unreachable"):
        await wait_for_db(retries=2, delay=0)

    await broken.dispose()


async def test_db_health_endpoint(client):
    res = await client.get("/api/v1/system/health/db")
    assert res.status_code == 200
    assert res.json()["db"] is True


async def test_db_health_reports_outage(client, monkeypatch):
    broken = create_async_engine("sqlite+aiosqlite:////nonexistent-dir/roomsplit.db")
    monkeypatch.setattr(db_check, "engine", broken)

    res = await client.get("/api/v1/system/health/db")
    assert res.status_code == 503
    assert res.json() == {"db": False, "message": "Database is unreachable"}

    await broken.dispose()
