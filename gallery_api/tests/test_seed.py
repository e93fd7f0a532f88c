from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from src.db import seed


def fake_result(*args, **kwargs):
    result = MagicMock()
    result.first.return_value = (uuid4(),)
    return result


@pytest.fixture
def seed_session(monkeypatch):
    session = AsyncMock(spec=AsyncSession)
    session.execute.side_effect = fake_result

    async def _sessions():
        yield session

    monkeypatch.setattr(seed, "get_async_session", _sessions)
    return session


def tenant_inserts(session):
    return [
        call.args[1]
        for call in session.execute.await_args_list
        if "INSERT INTO tenants" in str(call.args[0])
    ]


@pytest.mark.asyncio
async def test_demo_tenants_get_distinct_creation_times(seed_session):
    await seed.seed_all()

    created = {params["slug"]: params["created_at"] for params in tenant_inserts(seed_session)}

    assert set(created) == {"aurora", "northlight", "placeholder"}
    assert created["aurora"] > created["northlight"] > created["placeholder"]
    seed_session.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_listing_order_follows_declaration_order(seed_session):
    await seed.seed_all()

    created = {params["slug"]: params["created_at"] for params in tenant_inserts(seed_session)}
    newest_first = sorted(created, key=created.get, reverse=True)

    assert newest_first == [t["slug"] for t in reversed(seed.DEMO_TENANTS)]
