"""Unit tests for the status API."""

from unittest.mock import MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from meowbots.adapters.web.server import create_app
from meowbots.config import __version__
from meowbots.domain.role_slots import RoleSlotStore


@pytest.fixture
def store():
    s = RoleSlotStore()
    s.set("u1", 1, "r1")
    s.set("u1", 2, "r2")
    s.set("u2", 1, "r3")
    return s


@pytest.fixture
def transport(store):
    marten = MagicMock(ready=True)
    weasel = MagicMock(ready=False)
    return ASGITransport(app=create_app(store, {"marten": marten, "weasel": weasel}))


class TestStatusRoutes:
    @pytest.mark.asyncio
    async def test_status(self, transport):
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.get("/status")
        assert resp.status_code == 200
        data = resp.json()
        assert data == {
            "version": __version__,
            "bots": {"marten": True, "weasel": False},
            "users": 2,
            "roles": 3,
        }

    @pytest.mark.asyncio
    async def test_user_roles(self, transport):
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.get("/roles/u1")
        assert resp.status_code == 200
        assert resp.json() == {"user_id": "u1", "slots": {"1": "r1", "2": "r2"}}

    @pytest.mark.asyncio
    async def test_user_roles_unknown(self, transport):
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.get("/roles/nobody")
        assert resp.status_code == 404

    @pytest.mark.asyncio
    async def test_status_reflects_store_changes(self, store, transport):
        store.delete("u2", 1)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.get("/status")
        assert resp.json()["users"] == 1
