"""Influencers API client - admin pipeline."""

from launchpad_client.base import BaseClient
from launchpad_client.domains import AuthDomain
from launchpad_client.influencers.schemas import (
    CreateInfluencerInput,
    Influencer,
    InfluencerStatus,
    UpdateInfluencerInput,
)


class InfluencersClient(BaseClient):
    """Client for admin influencer endpoints."""

    domain = AuthDomain.ADMIN

    async def get_all(self) -> list[Influencer]:
        """GET /admin/influencers - all influencers."""
        return await self._get("/influencers")

    async def get_by_id(self, influencer_id: str) -> Influencer:
        """GET /admin/influencers/{id} - influencer details."""
        return await self._get(f"/influencers/{influencer_id}")

    async def create(self, data: CreateInfluencerInput) -> Influencer:
        """POST /admin/influencers - add influencer."""
        return await self._post("/influencers", data.model_dump(mode="json", exclude_none=True))

    async def update(self, influencer_id: str, data: UpdateInfluencerInput) -> Influencer:
        """PATCH /admin/influencers/{id} - update fields that are set."""
        return await self._patch(f"/influencers/{influencer_id}", data.model_dump(mode="json", exclude_unset=True))

    async def update_status(self, influencer_id: str, status: InfluencerStatus) -> Influencer:
        """PATCH /admin/influencers/{id} - move along the pipeline."""
        return await self._patch(f"/influencers/{influencer_id}", {"status": str(status)})

    async def delete(self, influencer_id: str) -> None:
        """DELETE /admin/influencers/{id}."""
        await self._delete(f"/influencers/{influencer_id}")

    async def get_by_status(self, status: InfluencerStatus) -> list[Influencer]:
        """GET /admin/influencers?status= - pipeline column."""
        return await self._get("/influencers", {"status": str(status)})

    async def get_by_contact_person(self, contact_person: str) -> list[Influencer]:
        """GET /admin/influencers?contact_person= - assigned to a team member."""
        return await self._get("/influencers", {"contact_person": contact_person})
