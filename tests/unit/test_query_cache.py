"""Tests for the query cache."""

import asyncio

import pytest

from app.query import AppLaunchKeys, InfluencerKeys, LoginAuditKeys, QueryClient, QueryStatus, make_key
from launchpad_client.login_audit import LoginAuditFilters


class Counter:
    """Async fetcher that counts calls and can be held open."""

    def __init__(self, value="data", error: Exception | None = None):
        self.calls = 0
        self.value = value
        self.error = error
        self.gate: asyncio.Event | None = None

    async def __call__(self):
        self.calls += 1
        if self.gate is not None:
            await self.gate.wait()
        else:
            await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        return f"{self.value}-{self.calls}"


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class TestKeys:
    def test_filter_order_irrelevant(self):
        assert make_key("x", {"a": 1, "b": 2}) == make_key("x", {"b": 2, "a": 1})

    def test_empty_filter_equals_none(self):
        assert make_key("x", {}) == make_key("x", None)
        assert make_key("x", {"a": None}) == make_key("x", None)

    def test_pydantic_filters(self):
        assert LoginAuditKeys.logs(LoginAuditFilters(email="a")) == LoginAuditKeys.logs({"email": "a"})
        assert LoginAuditKeys.logs(LoginAuditFilters()) == LoginAuditKeys.logs(None)

    def test_keys_share_resource_prefix(self):
        assert InfluencerKeys.detail("1")[:1] == InfluencerKeys.ALL
        assert InfluencerKeys.list("approved")[:1] == InfluencerKeys.ALL
        assert AppLaunchKeys.checklist("p1")[:1] == AppLaunchKeys.ALL


class TestFetch:
    @pytest.mark.asyncio
    async def test_concurrent_reads_share_one_call(self):
        qc = QueryClient(stale_time=60)
        fetcher = Counter()
        fetcher.gate = asyncio.Event()

        async def release():
            await asyncio.sleep(0)
            fetcher.gate.set()

        *results, _ = await asyncio.gather(
            qc.fetch(("k",), fetcher),
            qc.fetch(("k",), fetcher),
            qc.fetch(("k",), fetcher),
            release(),
        )

        assert fetcher.calls == 1
        assert [r.data for r in results] == ["data-1"] * 3
        assert all(r.is_success for r in results)

    @pytest.mark.asyncio
    async def test_fresh_data_served_from_cache(self):
        clock = FakeClock()
        qc = QueryClient(stale_time=60, clock=clock)
        fetcher = Counter()

        await qc.fetch(("k",), fetcher)
        clock.now = 59
        result = await qc.fetch(("k",), fetcher)

        assert fetcher.calls == 1
        assert result.data == "data-1"

    @pytest.mark.asyncio
    async def test_stale_data_refetched(self):
        clock = FakeClock()
        qc = QueryClient(stale_time=60, clock=clock)
        fetcher = Counter()

        await qc.fetch(("k",), fetcher)
        clock.now = 61
        result = await qc.fetch(("k",), fetcher)

        assert fetcher.calls == 2
        assert result.data == "data-2"

    @pytest.mark.asyncio
    async def test_per_query_stale_time(self):
        clock = FakeClock()
        qc = QueryClient(stale_time=0, clock=clock)
        fetcher = Counter()

        await qc.fetch(("k",), fetcher, stale_time=30)
        clock.now = 10
        await qc.fetch(("k",), fetcher, stale_time=30)
        assert fetcher.calls == 1

    @pytest.mark.asyncio
    async def test_disabled_makes_no_call(self):
        qc = QueryClient()
        fetcher = Counter()
        result = await qc.fetch(("k", ""), fetcher, enabled=False)
        assert result.status == QueryStatus.IDLE
        assert fetcher.calls == 0
        assert len(qc) == 0

    @pytest.mark.asyncio
    async def test_error_captured(self):
        qc = QueryClient(stale_time=60)
        boom = RuntimeError("boom")
        result = await qc.fetch(("k",), Counter(error=boom))
        assert result.is_error
        assert result.error is boom

    @pytest.mark.asyncio
    async def test_error_keeps_previous_data_and_retries_next_read(self):
        clock = FakeClock()
        qc = QueryClient(stale_time=60, clock=clock)
        fetcher = Counter()
        await qc.fetch(("k",), fetcher)

        qc.invalidate(("k",))
        fetcher.error = RuntimeError("down")
        failed = await qc.fetch(("k",), fetcher)
        assert failed.is_error
        assert failed.data == "data-1"

        fetcher.error = None
        recovered = await qc.fetch(("k",), fetcher)
        assert recovered.data == "data-3"

    @pytest.mark.asyncio
    async def test_cancelled_reader_does_not_cancel_fetch(self):
        qc = QueryClient(stale_time=60)
        fetcher = Counter()
        fetcher.gate = asyncio.Event()

        first = asyncio.ensure_future(qc.fetch(("k",), fetcher))
        await asyncio.sleep(0)
        second = asyncio.ensure_future(qc.fetch(("k",), fetcher))
        await asyncio.sleep(0)
        first.cancel()
        fetcher.gate.set()

        result = await second
        assert result.data == "data-1"
        assert fetcher.calls == 1


class TestQueryState:
    @pytest.mark.asyncio
    async def test_loading_while_in_flight(self):
        qc = QueryClient(stale_time=60)
        fetcher = Counter()
        fetcher.gate = asyncio.Event()

        assert qc.get_query_state(("k",)).is_idle

        pending = asyncio.ensure_future(qc.fetch(("k",), fetcher))
        await asyncio.sleep(0)

        assert qc.is_fetching(("k",))
        assert qc.get_query_state(("k",)).status == QueryStatus.LOADING

        fetcher.gate.set()
        await pending

        state = qc.get_query_state(("k",))
        assert not qc.is_fetching(("k",))
        assert state.is_success
        assert state.data == "data-1"

    @pytest.mark.asyncio
    async def test_refetch_keeps_previous_data_while_loading(self):
        qc = QueryClient(stale_time=60)
        fetcher = Counter()
        await qc.fetch(("k",), fetcher)
        qc.invalidate(("k",))

        fetcher.gate = asyncio.Event()
        pending = asyncio.ensure_future(qc.fetch(("k",), fetcher))
        await asyncio.sleep(0)

        state = qc.get_query_state(("k",))
        assert state.is_loading
        assert state.data == "data-1"

        fetcher.gate.set()
        await pending
        assert qc.get_query_state(("k",)).data == "data-2"

    @pytest.mark.asyncio
    async def test_error_state(self):
        qc = QueryClient()
        await qc.fetch(("k",), Counter(error=RuntimeError("down")))

        state = qc.get_query_state(("k",))
        assert state.is_error
        assert isinstance(state.error, RuntimeError)


class TestInvalidate:
    @pytest.mark.asyncio
    async def test_prefix_invalidation(self):
        qc = QueryClient(stale_time=60)
        influencers = Counter("inf")
        detail = Counter("detail")
        projects = Counter("proj")

        await qc.fetch(InfluencerKeys.list(), influencers)
        await qc.fetch(InfluencerKeys.detail("1"), detail)
        await qc.fetch(AppLaunchKeys.projects(), projects)

        assert qc.invalidate(InfluencerKeys.ALL) == 2

        await qc.fetch(InfluencerKeys.list(), influencers)
        await qc.fetch(InfluencerKeys.detail("1"), detail)
        await qc.fetch(AppLaunchKeys.projects(), projects)

        assert influencers.calls == 2
        assert detail.calls == 2
        assert projects.calls == 1

    @pytest.mark.asyncio
    async def test_invalidated_while_in_flight_stays_stale(self):
        qc = QueryClient(stale_time=60)
        fetcher = Counter()
        fetcher.gate = asyncio.Event()

        pending = asyncio.ensure_future(qc.fetch(("k",), fetcher))
        await asyncio.sleep(0)
        qc.invalidate(("k",))
        fetcher.gate.set()
        first = await pending

        fetcher.gate = None
        second = await qc.fetch(("k",), fetcher)

        assert first.data == "data-1"
        assert second.data == "data-2"

    def test_invalidate_nothing(self):
        assert QueryClient().invalidate(("missing",)) == 0


class TestMutate:
    @pytest.mark.asyncio
    async def test_success_invalidates(self):
        qc = QueryClient(stale_time=60)
        reader = Counter()
        await qc.fetch(InfluencerKeys.list(), reader)

        async def write(value, *, flag=False):
            return {"value": value, "flag": flag}

        result = await qc.mutate(write, 1, flag=True, invalidates=[InfluencerKeys.ALL])

        assert result.is_success
        assert result.data == {"value": 1, "flag": True}
        assert qc.is_stale(InfluencerKeys.list())

    @pytest.mark.asyncio
    async def test_failure_captured_and_cache_kept(self):
        qc = QueryClient(stale_time=60)
        await qc.fetch(InfluencerKeys.list(), Counter())

        async def write():
            raise ValueError("rejected")

        result = await qc.mutate(write, invalidates=[InfluencerKeys.ALL])

        assert result.is_error
        assert isinstance(result.error, ValueError)
        assert not qc.is_stale(InfluencerKeys.list())


class TestCacheData:
    def test_set_and_get(self):
        qc = QueryClient(stale_time=60)
        qc.set_query_data(("k", {"a": 1}), [1, 2])
        assert qc.get_query_data(("k", {"a": 1})) == [1, 2]
        assert not qc.is_stale(("k", {"a": 1}))

    def test_clear(self):
        qc = QueryClient()
        qc.set_query_data(("k",), 1)
        qc.clear()
        assert len(qc) == 0
        assert qc.get_query_data(("k",)) is None
