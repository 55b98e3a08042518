"""Influencer portal queries."""

from functools import partial

from app.query import InfluencerPortalKeys, MutationResult, QueryClient, QueryResult
from launchpad_client.influencer_portal import InfluencerPortalClient, UpdateInfluencerPayoutDetailsInput


class InfluencerPortalQueries:
    def __init__(self, query_client: QueryClient, api: InfluencerPortalClient):
        self._qc = query_client
        self._api = api

    async def profile(self) -> QueryResult:
        return await self._qc.fetch(InfluencerPortalKeys.profile(), self._api.get_profile)

    async def stats(self) -> QueryResult:
        return await self._qc.fetch(InfluencerPortalKeys.stats(), self._api.get_stats)

    async def earnings_chart(self, months: int | None = None) -> QueryResult:
        return await self._qc.fetch(InfluencerPortalKeys.earnings_chart(months), partial(self._api.get_earnings_chart, months))

    async def campaigns(self, status: str | None = None) -> QueryResult:
        return await self._qc.fetch(InfluencerPortalKeys.campaigns(status), partial(self._api.get_campaigns, status))

    async def campaign(self, campaign_id: str) -> QueryResult:
        return await self._qc.fetch(
            InfluencerPortalKeys.campaign(campaign_id),
            partial(self._api.get_campaign, campaign_id),
            enabled=bool(campaign_id),
        )

    async def earnings(self, status: str | None = None) -> QueryResult:
        return await self._qc.fetch(InfluencerPortalKeys.earnings(status), partial(self._api.get_earnings, status))

    async def payouts(self) -> QueryResult:
        return await self._qc.fetch(InfluencerPortalKeys.payouts(), self._api.get_payout_history)

    async def update_payout_details(self, data: UpdateInfluencerPayoutDetailsInput) -> MutationResult:
        return await self._qc.mutate(self._api.update_payout_details, data, invalidates=[InfluencerPortalKeys.ALL])

    async def request_payout(self, amount: float) -> MutationResult:
        return await self._qc.mutate(self._api.request_payout, amount, invalidates=[InfluencerPortalKeys.ALL])
