"""Tests for resource query classes against a fake backend."""

import pytest
from support import body, make_session

from app.queries import (
    AppLaunchQueries,
    DealQueries,
    HealthQueries,
    InfluencerQueries,
    PartnerQueries,
    SalesQueries,
    summarize_checklist,
)
from app.queries.health import DATABASE_STALE_TIME
from app.query import QueryClient
from launchpad_client import (
    AppLaunchClient,
    DealsClient,
    HealthClient,
    InfluencerManagerClient,
    InfluencersClient,
    PartnersClient,
    SalesClient,
)
from launchpad_client.app_launch import ChecklistCategory
from launchpad_client.credentials import SharedPasswordAuth
from launchpad_client.deals import UpdateDealInput
from launchpad_client.influencers import InfluencerStatus
from launchpad_client.partners import CreatorType, PartnerFilters

INFLUENCERS = "/api/v1/admin/influencers"


def item(category: str, completed: bool) -> dict:
    return {"id": f"{category}-{completed}", "category": category, "is_completed": completed}


@pytest.fixture
def query_client():
    return QueryClient(stale_time=60)


class TestInfluencerQueries:
    @pytest.mark.asyncio
    async def test_empty_id_makes_no_request(self, backend, admin_store, query_client, client_factory):
        api = await client_factory(InfluencersClient, admin_store)
        queries = InfluencerQueries(query_client, api)

        result = await queries.influencer("")

        assert result.is_idle
        assert backend.requests == []

    @pytest.mark.asyncio
    async def test_status_filter(self, backend, admin_store, query_client, client_factory):
        backend.route("GET", INFLUENCERS, [{"id": "i1"}])
        api = await client_factory(InfluencersClient, admin_store)
        queries = InfluencerQueries(query_client, api)

        result = await queries.influencers(status=InfluencerStatus.APPROVED)

        assert result.data == [{"id": "i1"}]
        assert backend.requests[0].url.params["status"] == "approved"

    @pytest.mark.asyncio
    async def test_update_refreshes_list_and_detail(self, backend, admin_store, query_client, client_factory):
        admin_store.set(make_session())
        backend.route("GET", INFLUENCERS, [])
        backend.route("GET", f"{INFLUENCERS}/i1", {"id": "i1"})
        backend.route("PATCH", f"{INFLUENCERS}/i1", {"id": "i1", "status": "contacted"})
        api = await client_factory(InfluencersClient, admin_store)
        queries = InfluencerQueries(query_client, api)

        await queries.influencers()
        await queries.influencer("i1")
        mutation = await queries.update_status("i1", InfluencerStatus.CONTACTED)
        await queries.influencers()
        await queries.influencer("i1")

        assert mutation.is_success
        assert body(backend.calls("PATCH")[0]) == {"status": "contacted"}
        assert len(backend.calls("GET", INFLUENCERS)) == 2
        assert len(backend.calls("GET", f"{INFLUENCERS}/i1")) == 2

    @pytest.mark.asyncio
    async def test_failed_mutation_keeps_cache(self, backend, admin_store, query_client, client_factory):
        backend.route("GET", INFLUENCERS, [])
        backend.route("DELETE", f"{INFLUENCERS}/i1", {"detail": "nope"}, status=403)
        api = await client_factory(InfluencersClient, admin_store)
        queries = InfluencerQueries(query_client, api)

        await queries.influencers()
        mutation = await queries.delete("i1")
        await queries.influencers()

        assert mutation.is_error
        assert mutation.error.status_code == 403
        assert len(backend.calls("GET", INFLUENCERS)) == 1

    @pytest.mark.asyncio
    async def test_manager_list(self, backend, admin_store, manager_store, query_client, client_factory):
        backend.route("GET", "/api/v1/influencer-manager/influencers", [{"id": "i2"}])
        api = await client_factory(InfluencersClient, admin_store)
        manager_api = await client_factory(InfluencerManagerClient, manager_store)
        queries = InfluencerQueries(query_client, api, manager_api)

        result = await queries.manager_influencers()

        assert result.data == [{"id": "i2"}]

    @pytest.mark.asyncio
    async def test_manager_list_needs_client(self, admin_store, query_client, client_factory):
        api = await client_factory(InfluencersClient, admin_store)
        with pytest.raises(RuntimeError):
            await InfluencerQueries(query_client, api).manager_influencers()


class TestAppLaunchQueries:
    @pytest.mark.asyncio
    async def test_checklist_progress(self, backend, admin_store, query_client, client_factory):
        backend.route(
            "GET",
            "/api/v1/admin/app-launch/projects/p1/checklist",
            [item("setup", True), item("setup", True), item("setup", False), item("assets", False)],
        )
        api = await client_factory(AppLaunchClient, admin_store)
        queries = AppLaunchQueries(query_client, api)

        progress = await queries.checklist_progress("p1")

        by_category = {p.category: p for p in progress.progress}
        assert by_category[ChecklistCategory.SETUP].percentage == 67
        assert by_category[ChecklistCategory.ASSETS].percentage == 0
        assert by_category[ChecklistCategory.RELEASE].total == 0
        assert by_category[ChecklistCategory.RELEASE].percentage == 0
        assert progress.total_progress == 50

    @pytest.mark.asyncio
    async def test_toggle_invalidates_checklist(self, backend, admin_store, query_client, client_factory):
        backend.route("GET", "/api/v1/admin/app-launch/projects/p1/checklist", [])
        backend.route("PATCH", "/api/v1/admin/app-launch/checklist/c1", {"id": "c1", "is_completed": True})
        api = await client_factory(AppLaunchClient, admin_store)
        queries = AppLaunchQueries(query_client, api)

        await queries.checklist("p1")
        await queries.toggle_checklist_item("c1", True)
        await queries.checklist("p1")

        assert body(backend.calls("PATCH")[0]) == {"is_completed": True}
        assert len(backend.calls("GET")) == 2

    @pytest.mark.asyncio
    async def test_checklist_disabled_without_id(self, backend, admin_store, query_client, client_factory):
        api = await client_factory(AppLaunchClient, admin_store)
        result = await AppLaunchQueries(query_client, api).checklist("")
        assert result.is_idle
        assert backend.requests == []


class TestSummarizeChecklist:
    def test_empty(self):
        progress = summarize_checklist([])
        assert progress.progress == []
        assert progress.total_progress == 0

    def test_half_complete(self):
        progress = summarize_checklist([item("beta", True), item("beta", False)])
        beta = next(p for p in progress.progress if p.category == ChecklistCategory.BETA)
        assert beta.percentage == 50

    def test_rounds_half_up(self):
        items = [item("compliance", True)] + [item("compliance", False)] * 7
        compliance = summarize_checklist(items).progress[3]
        assert compliance.category == ChecklistCategory.COMPLIANCE
        assert compliance.percentage == 13

    def test_all_done(self):
        progress = summarize_checklist([item(c.value, True) for c in ChecklistCategory])
        assert progress.total_progress == 100
        assert all(p.percentage == 100 for p in progress.progress)


class TestHealthQueries:
    @pytest.mark.asyncio
    async def test_database_uses_short_stale_time(self, backend, admin_store, client_factory):
        backend.route("GET", "/api/v1/admin/health/database", {"cache_hit_ratio": 99.5})
        clock_now = [0.0]
        query_client = QueryClient(stale_time=3600, clock=lambda: clock_now[0])
        api = await client_factory(HealthClient, admin_store)
        queries = HealthQueries(query_client, api)

        await queries.database()
        clock_now[0] = DATABASE_STALE_TIME - 1
        await queries.database()
        clock_now[0] = DATABASE_STALE_TIME + 1
        await queries.database()

        assert len(backend.requests) == 2


class TestSalesQueries:
    @pytest.mark.asyncio
    async def test_add_note_invalidates_leads(self, backend, query_client, client_factory):
        backend.route("GET", "/api/v1/sales/leads/l1", {"id": "l1", "notes": []})
        backend.route("POST", "/api/v1/sales/leads/l1/notes", {"success": True})
        api = await client_factory(SalesClient, auth=SharedPasswordAuth("pw"))
        queries = SalesQueries(query_client, api)

        await queries.lead("l1")
        await queries.add_note("l1", "Called, wants a demo")
        await queries.lead("l1")

        note_request = backend.calls("POST")[0]
        assert body(note_request) == {"content": "Called, wants a demo"}
        assert note_request.url.params["password"] == "pw"
        assert len(backend.calls("GET")) == 2


class TestPartnerQueries:
    @pytest.mark.asyncio
    async def test_batch_payout_refreshes_payouts_and_list(self, backend, admin_store, query_client, client_factory):
        backend.route("GET", "/api/v1/admin/partners", [{"partner_id": "p1"}])
        backend.route("GET", "/api/v1/admin/pending-payouts", {"pending_payouts": [], "total_pending": 0, "min_payout": 50})
        backend.route("POST", "/api/v1/admin/send-batch-revolut-payouts", {"success": True})
        api = await client_factory(PartnersClient, admin_store)
        queries = PartnerQueries(query_client, api)

        first = await queries.partners()
        await queries.pending_payouts()
        mutation = await queries.send_batch_payouts()
        await queries.partners()
        await queries.pending_payouts()

        assert first.data == [{"partner_id": "p1", "id": "p1", "creator_type": "partner"}]
        assert mutation.is_success
        assert len(backend.calls("GET", "/api/v1/admin/partners")) == 2
        assert len(backend.calls("GET", "/api/v1/admin/pending-payouts")) == 2

    @pytest.mark.asyncio
    async def test_filtered_lists_cached_separately(self, backend, admin_store, query_client, client_factory):
        backend.route("GET", "/api/v1/admin/partners", [])
        api = await client_factory(PartnersClient, admin_store)
        queries = PartnerQueries(query_client, api)

        await queries.partners(PartnerFilters(creator_type=CreatorType.INFLUENCER))
        await queries.partners(PartnerFilters(creator_type=CreatorType.INFLUENCER))
        await queries.partners()

        assert len(backend.requests) == 2


class TestDealQueries:
    @pytest.mark.asyncio
    async def test_update_refreshes_detail_creator_and_stats(self, backend, admin_store, query_client, client_factory):
        deals = [{"id": "d1", "creator_id": "p1", "stage": "lead", "deal_value": 149}]
        backend.route("GET", "/api/v1/admin/deals", deals)
        backend.route("GET", "/api/v1/admin/deals/d1", deals[0])
        backend.route("PATCH", "/api/v1/admin/deals/d1", {**deals[0], "stage": "contacted"})
        api = await client_factory(DealsClient, admin_store)
        queries = DealQueries(query_client, api)

        await queries.deal("d1")
        await queries.creator_deals("p1")
        stats = await queries.stats()
        mutation = await queries.update("d1", UpdateDealInput(stage="contacted"))
        await queries.deal("d1")
        await queries.creator_deals("p1")
        await queries.stats()

        assert stats.data["open_deals"] == 1
        assert mutation.is_success
        assert len(backend.calls("GET", "/api/v1/admin/deals/d1")) == 2
        # creator list and stats both read the deal list
        assert len(backend.calls("GET", "/api/v1/admin/deals")) == 4

    @pytest.mark.asyncio
    async def test_empty_ids_disabled(self, backend, admin_store, query_client, client_factory):
        api = await client_factory(DealsClient, admin_store)
        queries = DealQueries(query_client, api)

        assert (await queries.deal("")).is_idle
        assert (await queries.creator_deals("")).is_idle
        assert (await queries.creator_stats("")).is_idle
        assert backend.requests == []
