"""Enterprise deal queries."""

from functools import partial

from app.query import DealKeys, MutationResult, QueryClient, QueryResult
from launchpad_client.deals import CreateDealInput, DealsClient, UpdateDealInput


class DealQueries:
    def __init__(self, query_client: QueryClient, api: DealsClient):
        self._qc = query_client
        self._api = api

    async def deals(self) -> QueryResult:
        return await self._qc.fetch(DealKeys.list(), self._api.get_all)

    async def creator_deals(self, creator_id: str) -> QueryResult:
        return await self._qc.fetch(
            DealKeys.creator(creator_id),
            partial(self._api.get_by_creator, creator_id),
            enabled=bool(creator_id),
        )

    async def deal(self, deal_id: str) -> QueryResult:
        return await self._qc.fetch(
            DealKeys.detail(deal_id),
            partial(self._api.get_by_id, deal_id),
            enabled=bool(deal_id),
        )

    async def stats(self) -> QueryResult:
        return await self._qc.fetch(DealKeys.stats(), self._api.get_stats)

    async def creator_stats(self, creator_id: str) -> QueryResult:
        return await self._qc.fetch(
            DealKeys.stats(creator_id),
            partial(self._api.get_creator_stats, creator_id),
            enabled=bool(creator_id),
        )

    # Writes invalidate the whole deals prefix; detail, creator and stats keys sit under it

    async def create(self, data: CreateDealInput) -> MutationResult:
        return await self._qc.mutate(
            self._api.create,
            data,
            invalidates=[DealKeys.ALL, DealKeys.creator(data.creator_id), DealKeys.stats()],
        )

    async def update(self, deal_id: str, data: UpdateDealInput) -> MutationResult:
        return await self._qc.mutate(
            self._api.update,
            deal_id,
            data,
            invalidates=[DealKeys.ALL, DealKeys.detail(deal_id), DealKeys.stats()],
        )

    async def advance_stage(self, deal_id: str) -> MutationResult:
        return await self._qc.mutate(
            self._api.advance_stage,
            deal_id,
            invalidates=[DealKeys.ALL, DealKeys.detail(deal_id), DealKeys.stats()],
        )

    async def delete(self, deal_id: str) -> MutationResult:
        return await self._qc.mutate(self._api.delete, deal_id, invalidates=[DealKeys.ALL, DealKeys.stats()])
