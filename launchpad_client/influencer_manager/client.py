"""Influencer manager API client - limited-access influencer pipeline."""

from launchpad_client.base import BaseClient
from launchpad_client.domains import AuthDomain
from launchpad_client.influencer_manager.schemas import (
    InfluencerManagerLoginInput,
    InfluencerManagerLoginResponse,
)
from launchpad_client.influencers.schemas import Influencer, InfluencerStatus


class InfluencerManagerClient(BaseClient):
    """Client for influencer manager endpoints."""

    domain = AuthDomain.INFLUENCER_MANAGER

    async def login(self, data: InfluencerManagerLoginInput) -> InfluencerManagerLoginResponse:
        """POST /influencer-manager/auth/login - returns {token, user}."""
        return await self._post("/auth/login", data.model_dump(mode="json"))

    async def get_influencers(self, status: InfluencerStatus | None = None) -> list[Influencer]:
        """GET /influencer-manager/influencers - influencers visible to the manager."""
        return await self._get("/influencers", {"status": status and str(status)})
