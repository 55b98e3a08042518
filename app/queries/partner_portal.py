"""Partner portal queries."""

from functools import partial

from app.query import MutationResult, PartnerPortalKeys, QueryClient, QueryResult
from launchpad_client.partner_portal import CreatePayoutRequestInput, PartnerPortalClient, UpdatePayoutDetailsInput


class PartnerPortalQueries:
    def __init__(self, query_client: QueryClient, api: PartnerPortalClient):
        self._qc = query_client
        self._api = api

    async def profile(self) -> QueryResult:
        return await self._qc.fetch(PartnerPortalKeys.profile(), self._api.get_profile)

    async def stats(self) -> QueryResult:
        return await self._qc.fetch(PartnerPortalKeys.stats(), self._api.get_stats)

    async def earnings_chart(self, months: int | None = None) -> QueryResult:
        return await self._qc.fetch(PartnerPortalKeys.earnings_chart(months), partial(self._api.get_earnings_chart, months))

    async def referral_links(self) -> QueryResult:
        return await self._qc.fetch(PartnerPortalKeys.referral_links(), self._api.get_referral_links)

    async def referrals(self, status: str | None = None) -> QueryResult:
        return await self._qc.fetch(PartnerPortalKeys.referrals(status), partial(self._api.get_referrals, status))

    async def payouts(self) -> QueryResult:
        return await self._qc.fetch(PartnerPortalKeys.payouts(), self._api.get_payout_history)

    async def payout_eligibility(self) -> QueryResult:
        return await self._qc.fetch(PartnerPortalKeys.payout_eligibility(), self._api.get_payout_eligibility)

    async def create_referral_link(self, code: str | None = None) -> MutationResult:
        return await self._qc.mutate(self._api.create_referral_link, code, invalidates=[PartnerPortalKeys.ALL])

    async def update_payout_details(self, data: UpdatePayoutDetailsInput) -> MutationResult:
        return await self._qc.mutate(self._api.update_payout_details, data, invalidates=[PartnerPortalKeys.ALL])

    async def request_payout(self, data: CreatePayoutRequestInput) -> MutationResult:
        return await self._qc.mutate(self._api.request_payout, data, invalidates=[PartnerPortalKeys.ALL])
