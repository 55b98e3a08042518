"""Partner admin queries - creators, referrals, payouts."""

from functools import partial

from app.query import MutationResult, PartnerKeys, QueryClient, QueryResult
from launchpad_client.partners import (
    ApprovePartnerInput,
    CreatePartnerInput,
    CreatePayoutInput,
    PartnerFilters,
    PartnersClient,
    UpdatePartnerInput,
)


class PartnerQueries:
    """Cached reads and invalidating writes for the admin partner pages.

    Referral and payout reads share the partners prefix, so any write
    refreshes them along with the partner list.
    """

    def __init__(self, query_client: QueryClient, api: PartnersClient):
        self._qc = query_client
        self._api = api

    async def partners(self, filters: PartnerFilters | None = None) -> QueryResult:
        return await self._qc.fetch(PartnerKeys.list(filters), partial(self._api.get_all, filters))

    async def pending_approvals(self) -> QueryResult:
        return await self._qc.fetch(PartnerKeys.pending_approvals(), self._api.get_pending_approvals)

    async def referrals(self, partner_id: str | None = None) -> QueryResult:
        return await self._qc.fetch(PartnerKeys.referrals(partner_id), partial(self._api.get_referrals, partner_id))

    async def pending_payouts(self) -> QueryResult:
        return await self._qc.fetch(PartnerKeys.pending_payouts(), self._api.get_pending_payouts)

    async def create(self, data: CreatePartnerInput) -> MutationResult:
        return await self._qc.mutate(self._api.create, data, invalidates=[PartnerKeys.ALL])

    async def update(self, partner_id: str, data: UpdatePartnerInput) -> MutationResult:
        return await self._qc.mutate(self._api.update, partner_id, data, invalidates=[PartnerKeys.ALL])

    async def delete(self, partner_id: str) -> MutationResult:
        return await self._qc.mutate(self._api.delete, partner_id, invalidates=[PartnerKeys.ALL])

    async def approve(self, data: ApprovePartnerInput) -> MutationResult:
        return await self._qc.mutate(self._api.approve, data, invalidates=[PartnerKeys.ALL])

    async def create_payout(self, data: CreatePayoutInput) -> MutationResult:
        return await self._qc.mutate(self._api.create_payout, data, invalidates=[PartnerKeys.ALL])

    async def send_payout(self, partner_id: str) -> MutationResult:
        return await self._qc.mutate(self._api.send_revolut_payout, partner_id, invalidates=[PartnerKeys.ALL])

    async def send_batch_payouts(self) -> MutationResult:
        return await self._qc.mutate(self._api.send_batch_payouts, invalidates=[PartnerKeys.ALL])

    async def confirm_pending_commissions(self) -> MutationResult:
        return await self._qc.mutate(self._api.confirm_pending_commissions, invalidates=[PartnerKeys.ALL])
