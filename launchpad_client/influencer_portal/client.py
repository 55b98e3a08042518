"""Influencer portal API client - profile, campaigns, earnings, payouts."""

from launchpad_client.base import BaseClient
from launchpad_client.domains import AuthDomain
from launchpad_client.influencer_portal.schemas import (
    EarningsChartData,
    EarningsEntry,
    InfluencerCampaign,
    InfluencerPayout,
    InfluencerProfile,
    InfluencerStats,
    PortalLoginInput,
    PortalLoginResponse,
    UpdateInfluencerPayoutDetailsInput,
)


class InfluencerPortalClient(BaseClient):
    """Client for influencer portal endpoints."""

    domain = AuthDomain.INFLUENCER_PORTAL

    async def login(self, data: PortalLoginInput) -> PortalLoginResponse:
        """POST /influencer-portal/auth/login - returns {token, influencer}."""
        return await self._post("/auth/login", data.model_dump(mode="json"))

    # ========== Profile ==========

    async def get_profile(self) -> InfluencerProfile:
        """GET /influencer-portal/profile."""
        return await self._get("/profile")

    async def update_payout_details(self, data: UpdateInfluencerPayoutDetailsInput) -> InfluencerProfile:
        """PATCH /influencer-portal/profile/payout-details."""
        return await self._patch("/profile/payout-details", data.model_dump(mode="json", exclude_none=True))

    # ========== Stats ==========

    async def get_stats(self) -> InfluencerStats:
        """GET /influencer-portal/stats."""
        return await self._get("/stats")

    async def get_earnings_chart(self, months: int | None = None) -> list[EarningsChartData]:
        """GET /influencer-portal/stats/earnings-chart?months=."""
        return await self._get("/stats/earnings-chart", {"months": months})

    # ========== Campaigns ==========

    async def get_campaigns(self, status: str | None = None) -> list[InfluencerCampaign]:
        """GET /influencer-portal/campaigns?status=."""
        return await self._get("/campaigns", {"status": status})

    async def get_campaign(self, campaign_id: str) -> InfluencerCampaign:
        """GET /influencer-portal/campaigns/{id}."""
        return await self._get(f"/campaigns/{campaign_id}")

    # ========== Earnings & payouts ==========

    async def get_earnings(self, status: str | None = None) -> list[EarningsEntry]:
        """GET /influencer-portal/earnings?status=."""
        return await self._get("/earnings", {"status": status})

    async def get_payout_history(self) -> list[InfluencerPayout]:
        """GET /influencer-portal/payouts."""
        return await self._get("/payouts")

    async def request_payout(self, amount: float) -> InfluencerPayout:
        """POST /influencer-portal/payouts/request."""
        return await self._post("/payouts/request", {"amount": amount})
