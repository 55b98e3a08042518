"""Partner portal API client - referrals, earnings, payouts."""

from launchpad_client.base import BaseClient
from launchpad_client.domains import AuthDomain
from launchpad_client.partner_portal.schemas import (
    CreatePayoutRequestInput,
    EarningsDataPoint,
    PartnerLoginInput,
    PartnerLoginResponse,
    PartnerProfile,
    PartnerReferralView,
    PartnerStats,
    PayoutEligibility,
    PayoutRequest,
    ReferralLink,
    UpdatePayoutDetailsInput,
)


class PartnerPortalClient(BaseClient):
    """Client for partner portal endpoints."""

    domain = AuthDomain.PARTNER

    async def login(self, data: PartnerLoginInput) -> PartnerLoginResponse:
        """POST /partner/auth/login - returns {token, partner}."""
        return await self._post("/auth/login", data.model_dump(mode="json"))

    # ========== Profile ==========

    async def get_profile(self) -> PartnerProfile:
        """GET /partner/profile."""
        return await self._get("/profile")

    async def update_payout_details(self, data: UpdatePayoutDetailsInput) -> PartnerProfile:
        """PATCH /partner/profile/payout."""
        return await self._patch("/profile/payout", data.model_dump(mode="json", exclude_none=True))

    # ========== Stats ==========

    async def get_stats(self) -> PartnerStats:
        """GET /partner/stats."""
        return await self._get("/stats")

    async def get_earnings_chart(self, months: int | None = None) -> list[EarningsDataPoint]:
        """GET /partner/stats/earnings?months= (12 when not given)."""
        return await self._get("/stats/earnings", {"months": months or 12})

    # ========== Referrals ==========

    async def get_referral_links(self) -> list[ReferralLink]:
        """GET /partner/referral-links."""
        return await self._get("/referral-links")

    async def create_referral_link(self, code: str | None = None) -> ReferralLink:
        """POST /partner/referral-links - backend picks a code when none given."""
        return await self._post("/referral-links", {"code": code} if code is not None else {})

    async def get_referrals(self, status: str | None = None) -> list[PartnerReferralView]:
        """GET /partner/referrals?status=."""
        return await self._get("/referrals", {"status": status})

    # ========== Payouts ==========

    async def get_payout_history(self) -> list[PayoutRequest]:
        """GET /partner/payouts."""
        return await self._get("/payouts")

    async def request_payout(self, data: CreatePayoutRequestInput) -> PayoutRequest:
        """POST /partner/payouts/request."""
        return await self._post("/payouts/request", data.model_dump(mode="json"))

    async def get_payout_eligibility(self) -> PayoutEligibility:
        """GET /partner/payouts/eligibility."""
        return await self._get("/payouts/eligibility")
