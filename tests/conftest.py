"""Shared fixtures: in-memory storage, per-domain stores and a fake backend."""

import pytest
from support import BASE_URL, FakeBackend

from launchpad_client import AuthDomain, MemoryStorage, RecordingNavigator, TokenStore


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def navigator():
    return RecordingNavigator()


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def admin_store(storage):
    return TokenStore(storage, AuthDomain.ADMIN)


@pytest.fixture
def manager_store(storage):
    return TokenStore(storage, AuthDomain.INFLUENCER_MANAGER)


@pytest.fixture
def portal_store(storage):
    return TokenStore(storage, AuthDomain.INFLUENCER_PORTAL)


@pytest.fixture
def partner_store(storage):
    return TokenStore(storage, AuthDomain.PARTNER)


@pytest.fixture
async def client_factory(backend, navigator):
    """Build and open clients against the fake backend; all closed on teardown."""
    opened = []

    async def factory(cls, store=None, **kwargs):
        client = cls(store, navigator, base_url=BASE_URL, transport=backend.transport, **kwargs)
        await client.open()
        opened.append(client)
        return client

    yield factory
    for client in opened:
        await client.aclose()
