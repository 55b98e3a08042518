"""Influencer queries - admin pipeline and influencer manager view."""

from functools import partial

from app.query import InfluencerKeys, MutationResult, QueryClient, QueryResult
from launchpad_client.influencer_manager import InfluencerManagerClient
from launchpad_client.influencers import (
    CreateInfluencerInput,
    InfluencersClient,
    InfluencerStatus,
    UpdateInfluencerInput,
)


class InfluencerQueries:
    """Cached reads and invalidating writes for influencers."""

    def __init__(
        self,
        query_client: QueryClient,
        api: InfluencersClient,
        manager_api: InfluencerManagerClient | None = None,
    ):
        self._qc = query_client
        self._api = api
        self._manager_api = manager_api

    async def influencers(self, status: InfluencerStatus | None = None, contact_person: str | None = None) -> QueryResult:
        if status is not None:
            fn = partial(self._api.get_by_status, status)
        elif contact_person:
            fn = partial(self._api.get_by_contact_person, contact_person)
        else:
            fn = self._api.get_all
        return await self._qc.fetch(InfluencerKeys.list(status, contact_person), fn)

    async def influencer(self, influencer_id: str) -> QueryResult:
        return await self._qc.fetch(
            InfluencerKeys.detail(influencer_id),
            partial(self._api.get_by_id, influencer_id),
            enabled=bool(influencer_id),
        )

    async def manager_influencers(self, status: InfluencerStatus | None = None) -> QueryResult:
        """Influencers as seen by a logged-in influencer manager."""
        if self._manager_api is None:
            raise RuntimeError("InfluencerQueries built without an influencer manager client")
        return await self._qc.fetch(
            InfluencerKeys.manager_list(status),
            partial(self._manager_api.get_influencers, status),
        )

    async def create(self, data: CreateInfluencerInput) -> MutationResult:
        return await self._qc.mutate(self._api.create, data, invalidates=[InfluencerKeys.ALL])

    async def update(self, influencer_id: str, data: UpdateInfluencerInput) -> MutationResult:
        return await self._qc.mutate(self._api.update, influencer_id, data, invalidates=[InfluencerKeys.ALL])

    async def update_status(self, influencer_id: str, status: InfluencerStatus) -> MutationResult:
        return await self._qc.mutate(self._api.update_status, influencer_id, status, invalidates=[InfluencerKeys.ALL])

    async def delete(self, influencer_id: str) -> MutationResult:
        return await self._qc.mutate(self._api.delete, influencer_id, invalidates=[InfluencerKeys.ALL])
