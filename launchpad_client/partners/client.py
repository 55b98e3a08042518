"""Partners API client - admin management of creators and their payouts."""

from launchpad_client.base import BaseClient
from launchpad_client.domains import AuthDomain
from launchpad_client.partners.schemas import (
    ApprovePartnerInput,
    BatchPayoutsSent,
    CreatePartnerInput,
    CreatePartnerResponse,
    CreatePayoutInput,
    CreatorType,
    Partner,
    PartnerFilters,
    PartnerReferral,
    PartnerStatus,
    PayoutCreated,
    PendingPayouts,
    RevolutPayoutSent,
    UpdatePartnerInput,
    normalize_partner,
)


class PartnersClient(BaseClient):
    """Client for admin partner endpoints.

    Partner lists come from a statistics view and are normalized so every
    record has ``id`` and ``creator_type``.
    """

    domain = AuthDomain.ADMIN

    # ========== Partners ==========

    async def get_all(self, filters: PartnerFilters | None = None) -> list[Partner]:
        """GET /admin/partners?creator_type=&status=."""
        params = filters.model_dump(mode="json", exclude_none=True) if filters else None
        data = await self._get("/partners", params)
        return [normalize_partner(p) for p in data or []]

    async def get_partners(self) -> list[Partner]:
        """Creators of type partner only."""
        return await self.get_all(PartnerFilters(creator_type=CreatorType.PARTNER))

    async def get_influencers(self) -> list[Partner]:
        """Creators of type influencer only."""
        return await self.get_all(PartnerFilters(creator_type=CreatorType.INFLUENCER))

    async def get_pending_approvals(self) -> list[Partner]:
        """Creators waiting for approval."""
        return await self.get_all(PartnerFilters(status=PartnerStatus.PENDING_APPROVAL))

    async def create(self, data: CreatePartnerInput) -> CreatePartnerResponse:
        """POST /admin/partners - returns the partner with a generated password."""
        return await self._post("/partners", data.model_dump(mode="json", exclude_none=True))

    async def update(self, partner_id: str, data: UpdatePartnerInput) -> dict:
        """PUT /admin/partners/{id} - fields that are set."""
        return await self._put(f"/partners/{partner_id}", data.model_dump(mode="json", exclude_unset=True))

    async def delete(self, partner_id: str) -> dict:
        """DELETE /admin/partners/{id} - with its referrals and payouts."""
        return await self._delete(f"/partners/{partner_id}")

    async def approve(self, data: ApprovePartnerInput) -> dict:
        """POST /admin/partners/approve - approve or reject."""
        return await self._post("/partners/approve", data.model_dump(mode="json", exclude_none=True))

    # ========== Referrals ==========

    async def get_referrals(self, partner_id: str | None = None) -> list[PartnerReferral]:
        """GET /admin/partner-referrals?partner_id=."""
        return await self._get("/partner-referrals", {"partner_id": partner_id})

    async def confirm_pending_commissions(self) -> dict:
        """POST /admin/confirm-pending-commissions."""
        return await self._post("/confirm-pending-commissions")

    # ========== Payouts ==========

    async def get_pending_payouts(self) -> PendingPayouts:
        """GET /admin/pending-payouts."""
        return await self._get("/pending-payouts")

    async def create_payout(self, data: CreatePayoutInput) -> PayoutCreated:
        """POST /admin/partner-payouts - record a payout for a period."""
        return await self._post("/partner-payouts", data.model_dump(mode="json"))

    async def send_revolut_payout(self, partner_id: str) -> RevolutPayoutSent:
        """POST /admin/send-revolut-payout."""
        return await self._post("/send-revolut-payout", {"partner_id": partner_id})

    async def send_batch_payouts(self) -> BatchPayoutsSent:
        """POST /admin/send-batch-revolut-payouts - every eligible partner."""
        return await self._post("/send-batch-revolut-payouts")

    async def create_revolut_counterparty(self, partner_id: str) -> dict:
        """POST /admin/create-revolut-counterparty."""
        return await self._post("/create-revolut-counterparty", {"partner_id": partner_id})
