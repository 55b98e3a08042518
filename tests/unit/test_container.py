"""Tests for application wiring."""

import pytest
from support import BASE_URL, FakeBackend, make_session

from app.container import Container
from launchpad_client import MemoryStorage, RecordingNavigator


@pytest.mark.asyncio
async def test_container_resolves_stored_sessions():
    backend = FakeBackend()
    backend.route("GET", "/api/v1/admin/auth/me", {"user": {"id": "u1"}, "organization": {"id": "o1"}, "membership": {"role": "owner"}})
    storage = MemoryStorage()
    navigator = RecordingNavigator()

    container = Container(storage=storage, navigator=navigator, base_url=BASE_URL, transport=backend.transport)
    container.admin_store.set(make_session("tok", "u1"))

    async with container:
        assert container.admin.is_owner
        assert not container.partner.is_authenticated
        assert not container.portal.is_loading

    assert all(client.request_count <= 1 for client in container.clients)


@pytest.mark.asyncio
async def test_container_shares_navigator_and_cache():
    backend = FakeBackend()
    backend.route("GET", "/api/v1/partner/profile", {"detail": "expired"}, status=401)
    navigator = RecordingNavigator()

    async with Container(storage=MemoryStorage(), navigator=navigator, base_url=BASE_URL, transport=backend.transport) as c:
        c.partner_store.set(make_session("p", "p1"))
        result = await c.partner_portal_queries.profile()

    assert result.is_error
    assert navigator.history == ["/partner/login"]
    assert c.partner_store.get() is None
