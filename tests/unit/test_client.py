"""Tests for the base client: credentials, 401 handling and error mapping."""

import asyncio

import httpx
import pytest
from support import BASE_URL, body, make_session

from launchpad_client import (
    ApiError,
    BaseClient,
    CallbackNavigator,
    ConfigurationError,
    HealthClient,
    InfluencerManagerClient,
    InfluencersClient,
    PartnerPortalClient,
    SalesClient,
    TransportError,
    UnauthorizedError,
    safe_request,
    set_api_config,
)
from launchpad_client.credentials import SharedPasswordAuth
from launchpad_client.influencers import CreateInfluencerInput, InfluencerCategory

INFLUENCERS = "/api/v1/admin/influencers"

NEW_INFLUENCER = CreateInfluencerInput(
    instagram_handle="@lifter",
    full_name="Lift Er",
    follower_count=12000,
    engagement_rate=4.2,
    category=InfluencerCategory.FITNESS,
)


class TestCredentials:
    @pytest.mark.asyncio
    async def test_bearer_token_attached(self, backend, admin_store, client_factory):
        admin_store.set(make_session("secret-token"))
        backend.route("GET", INFLUENCERS, [])
        client = await client_factory(InfluencersClient, admin_store)

        await client.get_all()

        request = backend.calls("GET", INFLUENCERS)[0]
        assert request.headers["Authorization"] == "Bearer secret-token"
        assert "password" not in request.url.params

    @pytest.mark.asyncio
    async def test_no_token_no_header(self, backend, admin_store, client_factory):
        backend.route("GET", INFLUENCERS, [])
        client = await client_factory(InfluencersClient, admin_store)

        await client.get_all()

        assert "Authorization" not in backend.requests[0].headers

    @pytest.mark.asyncio
    async def test_legacy_password_param(self, backend, admin_store, client_factory, monkeypatch):
        monkeypatch.setattr("settings.ADMIN_LEGACY_PASSWORD_PARAM", True)
        admin_store.set(make_session("legacy-token"))
        backend.route("GET", INFLUENCERS, [])
        client = await client_factory(InfluencersClient, admin_store)

        await client.get_all()

        assert backend.requests[0].url.params["password"] == "legacy-token"

    @pytest.mark.asyncio
    async def test_sales_shared_password(self, backend, client_factory):
        backend.route("GET", "/api/v1/sales/leads", [])
        client = await client_factory(SalesClient, auth=SharedPasswordAuth("hunter2"))

        await client.get_leads(status="lead")

        request = backend.requests[0]
        assert request.url.params["password"] == "hunter2"
        assert request.url.params["status"] == "lead"
        assert "Authorization" not in request.headers

    @pytest.mark.asyncio
    async def test_token_read_per_request(self, backend, partner_store, client_factory):
        backend.route("GET", "/api/v1/partner/profile", {"id": "p1"})
        client = await client_factory(PartnerPortalClient, partner_store)

        partner_store.set(make_session("first", "p1"))
        await client.get_profile()
        partner_store.set(make_session("second", "p1"))
        await client.get_profile()

        assert [r.headers["Authorization"] for r in backend.requests] == ["Bearer first", "Bearer second"]

    def test_missing_store(self, navigator):
        with pytest.raises(ConfigurationError):
            InfluencersClient(None, navigator)

    def test_store_from_wrong_domain(self, partner_store, navigator):
        with pytest.raises(ConfigurationError):
            InfluencersClient(partner_store, navigator)

    def test_base_url(self, admin_store, manager_store):
        assert HealthClient(admin_store, base_url="http://x/").base_url == "http://x/api/v1/admin"
        assert InfluencerManagerClient(manager_store, base_url="http://x").base_url == "http://x/api/v1/influencer-manager"

    @pytest.mark.asyncio
    async def test_request_before_open(self, admin_store):
        client = InfluencersClient(admin_store, base_url=BASE_URL)
        with pytest.raises(RuntimeError):
            await client.get_all()


class TestUnauthorized:
    @pytest.mark.asyncio
    async def test_401_clears_and_redirects(self, backend, admin_store, navigator, client_factory):
        admin_store.set(make_session())
        backend.route("GET", INFLUENCERS, {"detail": "expired"}, status=401)
        client = await client_factory(InfluencersClient, admin_store)

        with pytest.raises(UnauthorizedError) as exc_info:
            await client.get_all()

        assert exc_info.value.message == "expired"
        assert admin_store.get() is None
        assert navigator.history == ["/login"]

    @pytest.mark.asyncio
    async def test_concurrent_401s_redirect_once(self, backend, admin_store, navigator, client_factory):
        admin_store.set(make_session())
        backend.route("GET", INFLUENCERS, {"detail": "expired"}, status=401)
        backend.route("GET", f"{INFLUENCERS}/i1", {"detail": "expired"}, status=401)
        backend.route("GET", f"{INFLUENCERS}/i2", {"detail": "expired"}, status=401)
        backend.gate = asyncio.Event()
        client = await client_factory(InfluencersClient, admin_store)

        async def release():
            while len(backend.requests) < 3:
                await asyncio.sleep(0)
            backend.gate.set()

        results = await asyncio.gather(
            client.get_all(),
            client.get_by_id("i1"),
            client.get_by_id("i2"),
            release(),
            return_exceptions=True,
        )

        assert all(isinstance(r, UnauthorizedError) for r in results[:3])
        assert navigator.history == ["/login"]
        assert admin_store.get() is None

    @pytest.mark.asyncio
    async def test_stale_401_keeps_new_session(self, backend, admin_store, navigator, client_factory):
        admin_store.set(make_session("old"))
        backend.route("GET", INFLUENCERS, status=401, json_body={"detail": "expired"})
        backend.gate = asyncio.Event()
        client = await client_factory(InfluencersClient, admin_store)

        pending = asyncio.ensure_future(client.get_all())
        while not backend.requests:
            await asyncio.sleep(0)
        admin_store.set(make_session("fresh"))
        backend.gate.set()

        with pytest.raises(UnauthorizedError):
            await pending
        assert admin_store.token == "fresh"
        assert navigator.history == []

    @pytest.mark.asyncio
    async def test_sales_401_does_not_redirect(self, backend, navigator, client_factory):
        backend.route("GET", "/api/v1/sales/pipeline-stats", {"detail": "bad password"}, status=401)
        client = await client_factory(SalesClient, auth=SharedPasswordAuth("wrong"))

        with pytest.raises(UnauthorizedError):
            await client.get_pipeline_stats()
        assert navigator.history == []

    @pytest.mark.asyncio
    async def test_other_domain_untouched(self, backend, admin_store, manager_store, navigator, client_factory):
        admin_store.set(make_session("admin"))
        manager_store.set(make_session("manager", "m1"))
        backend.route("GET", "/api/v1/influencer-manager/influencers", {"detail": "expired"}, status=401)
        client = await client_factory(InfluencerManagerClient, manager_store)

        with pytest.raises(UnauthorizedError):
            await client.get_influencers()

        assert manager_store.get() is None
        assert admin_store.token == "admin"
        assert navigator.history == ["/influencers/login"]


class TestErrors:
    @pytest.mark.asyncio
    async def test_api_error_keeps_payload(self, backend, admin_store, navigator, client_factory):
        admin_store.set(make_session())
        payload = {"detail": [{"loc": ["body", "email"], "msg": "field required"}]}
        backend.route("POST", INFLUENCERS, payload, status=422)
        client = await client_factory(InfluencersClient, admin_store)

        with pytest.raises(ApiError) as exc_info:
            await client.create(NEW_INFLUENCER)

        assert exc_info.value.status_code == 422
        assert exc_info.value.payload == payload
        assert body(backend.requests[0]) == {
            "instagram_handle": "@lifter",
            "full_name": "Lift Er",
            "follower_count": 12000,
            "engagement_rate": 4.2,
            "category": "fitness",
        }
        assert navigator.history == []

    @pytest.mark.asyncio
    async def test_text_error_body(self, backend, admin_store, client_factory):
        backend.route("GET", INFLUENCERS, handler=lambda r: httpx.Response(500, text="boom"))
        client = await client_factory(InfluencersClient, admin_store)

        with pytest.raises(ApiError) as exc_info:
            await client.get_all()
        assert exc_info.value.payload == "boom"

    @pytest.mark.asyncio
    async def test_transport_error(self, admin_store, navigator):
        def fail(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with InfluencersClient(admin_store, navigator, base_url=BASE_URL, transport=httpx.MockTransport(fail)) as client:
            with pytest.raises(TransportError):
                await client.get_all()

    @pytest.mark.asyncio
    async def test_empty_body(self, backend, admin_store, client_factory):
        backend.route("DELETE", f"{INFLUENCERS}/i1", status=204)
        client = await client_factory(InfluencersClient, admin_store)
        assert await client.delete("i1") is None

    @pytest.mark.asyncio
    async def test_safe_request_default(self, backend, admin_store, client_factory):
        client = await client_factory(InfluencersClient, admin_store)
        assert await safe_request(client.get_by_id("missing"), default={}) == {}

    @pytest.mark.asyncio
    async def test_request_count(self, backend, admin_store, client_factory):
        backend.route("GET", INFLUENCERS, [])
        client = await client_factory(InfluencersClient, admin_store)
        await client.get_all()
        await client.get_all()
        assert client.request_count == 2


class TestConfig:
    def test_base_client_is_admin_by_default(self, admin_store):
        assert BaseClient(admin_store).store is admin_store

    def test_set_api_config(self, admin_store, monkeypatch):
        monkeypatch.setattr("launchpad_client.base.API_BASE_URL", "http://localhost:8000")
        monkeypatch.setattr("launchpad_client.base.API_TIMEOUT", 30)
        set_api_config("https://api.launchpad.test", 5)

        client = HealthClient(admin_store)

        assert client.base_url == "https://api.launchpad.test/api/v1/admin"
        assert client._timeout == 5

    @pytest.mark.asyncio
    async def test_callback_navigator(self, backend, admin_store):
        admin_store.set(make_session())
        backend.route("GET", INFLUENCERS, {"detail": "expired"}, status=401)
        visited = []

        async with InfluencersClient(
            admin_store, CallbackNavigator(visited.append), base_url=BASE_URL, transport=backend.transport
        ) as client:
            with pytest.raises(UnauthorizedError):
                await client.get_all()

        assert visited == ["/login"]
