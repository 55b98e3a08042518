"""Deals API client - enterprise pipeline brought in by creators."""

from datetime import datetime, timezone

from loguru import logger

from launchpad_client.base import BaseClient
from launchpad_client.deals.schemas import (
    CLOSED_STAGES,
    CreateDealInput,
    DealStage,
    DealStats,
    EnterpriseDeal,
    UpdateDealInput,
    calculate_deal_value,
    next_stage,
    summarize_deals,
)
from launchpad_client.domains import AuthDomain


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class DealsClient(BaseClient):
    """Client for admin enterprise deal endpoints.

    Deal value and commission are priced here from the tier list, and
    stats are computed from the deal list.
    """

    domain = AuthDomain.ADMIN

    async def get_all(self) -> list[EnterpriseDeal]:
        """GET /admin/deals."""
        return await self._get("/deals")

    async def get_by_creator(self, creator_id: str) -> list[EnterpriseDeal]:
        """GET /admin/deals?creator_id=."""
        return await self._get("/deals", {"creator_id": creator_id})

    async def get_by_id(self, deal_id: str) -> EnterpriseDeal:
        """GET /admin/deals/{id}."""
        return await self._get(f"/deals/{deal_id}")

    async def create(self, data: CreateDealInput) -> EnterpriseDeal:
        """POST /admin/deals - new deals start as leads."""
        payload = data.model_dump(mode="json", exclude_none=True)
        payload.update(calculate_deal_value(data.tier, data.billing_cycle))
        payload["stage"] = DealStage.LEAD.value
        return await self._post("/deals", payload)

    async def update(self, deal_id: str, data: UpdateDealInput) -> EnterpriseDeal:
        """PATCH /admin/deals/{id} - reprices on tier or billing change."""
        payload = data.model_dump(mode="json", exclude_unset=True)

        if data.tier is not None or data.billing_cycle is not None:
            if data.tier is None or data.billing_cycle is None:
                current = await self.get_by_id(deal_id)
                tier = data.tier or current["tier"]
                cycle = data.billing_cycle or current["billing_cycle"]
            else:
                tier, cycle = data.tier, data.billing_cycle
            payload.update(calculate_deal_value(tier, cycle))

        if data.stage in CLOSED_STAGES:
            payload["closed_at"] = _now()
        payload["last_activity_at"] = _now()
        return await self._patch(f"/deals/{deal_id}", payload)

    async def advance_stage(self, deal_id: str) -> EnterpriseDeal:
        """Move a deal one stage forward; closed deals stay where they are."""
        deal = await self.get_by_id(deal_id)
        stage = next_stage(deal["stage"])
        if stage is None:
            logger.debug("Deal {} already at {}", deal_id, deal["stage"])
            return deal
        return await self.update(deal_id, UpdateDealInput(stage=stage))

    async def delete(self, deal_id: str) -> None:
        """DELETE /admin/deals/{id}."""
        await self._delete(f"/deals/{deal_id}")

    async def get_stats(self) -> DealStats:
        return summarize_deals(await self.get_all())

    async def get_creator_stats(self, creator_id: str) -> DealStats:
        return summarize_deals(await self.get_by_creator(creator_id))
