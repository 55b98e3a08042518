"""Enterprise deal pipeline schemas and calculations."""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Literal, TypedDict

from pydantic import BaseModel

from launchpad_client.partners.schemas import DEFAULT_COMMISSIONS, ProductType

BillingCycle = Literal["monthly", "yearly"]


class DealStage(StrEnum):
    """Pipeline stage, in pipeline order."""

    LEAD = "lead"
    CONTACTED = "contacted"
    DEMO_SCHEDULED = "demo_scheduled"
    DEMO_DONE = "demo_done"
    PROPOSAL_SENT = "proposal_sent"
    NEGOTIATION = "negotiation"
    CLOSED_WON = "closed_won"
    CLOSED_LOST = "closed_lost"


STAGE_ORDER = list(DealStage)
OPEN_STAGES = frozenset(STAGE_ORDER[: STAGE_ORDER.index(DealStage.CLOSED_WON)])
CLOSED_STAGES = frozenset({DealStage.CLOSED_WON, DealStage.CLOSED_LOST})


class EnterpriseTier(StrEnum):
    BASIC_GYM = "basic_gym"
    PRO_GYM = "pro_gym"
    ADVANCED_GYM = "advanced_gym"


@dataclass(frozen=True)
class TierPricing:
    label: str
    monthly_price: float
    yearly_price: float
    max_trainers: int
    description: str


ENTERPRISE_TIERS = {
    EnterpriseTier.BASIC_GYM: TierPricing("Basic Gym", 149, 1490, 3, "Single location"),
    EnterpriseTier.PRO_GYM: TierPricing("Pro Gym", 249, 2490, 6, "Medium facility"),
    EnterpriseTier.ADVANCED_GYM: TierPricing("Advanced Gym", 399, 3990, 10, "Multi zone"),
}


class EnterpriseDeal(TypedDict, total=False):
    id: str
    creator_id: str  # partner who brought the deal
    creator_name: str
    company_name: str
    contact_name: str
    contact_email: str
    contact_phone: str
    company_type: str
    location: str
    stage: str
    tier: str
    billing_cycle: str
    deal_value: float
    commission_amount: float
    created_at: str
    last_activity_at: str
    demo_date: str
    expected_close_date: str
    closed_at: str
    notes: str
    loss_reason: str


class DealStats(TypedDict):
    total_deals: int
    open_deals: int
    won_deals: int
    lost_deals: int
    total_pipeline_value: float
    total_won_value: float
    avg_deal_size: float
    conversion_rate: float  # percent of closed deals that were won
    deals_by_stage: dict[str, int]


class CreateDealInput(BaseModel):
    creator_id: str
    company_name: str
    contact_name: str
    contact_email: str
    contact_phone: str | None = None
    company_type: str | None = None
    location: str | None = None
    tier: EnterpriseTier
    billing_cycle: BillingCycle
    expected_close_date: str | None = None
    notes: str | None = None


class UpdateDealInput(BaseModel):
    """Partial update; only fields that are set are sent."""

    company_name: str | None = None
    contact_name: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    company_type: str | None = None
    location: str | None = None
    stage: DealStage | None = None
    tier: EnterpriseTier | None = None
    billing_cycle: BillingCycle | None = None
    demo_date: str | None = None
    expected_close_date: str | None = None
    notes: str | None = None
    loss_reason: str | None = None


def calculate_deal_value(tier: EnterpriseTier | str, billing_cycle: BillingCycle) -> dict[str, float]:
    """Deal value from the tier's list price, and the creator's commission on it."""
    pricing = ENTERPRISE_TIERS[EnterpriseTier(tier)]
    value = pricing.monthly_price if billing_cycle == "monthly" else pricing.yearly_price
    return {
        "deal_value": value,
        "commission_amount": value * DEFAULT_COMMISSIONS[ProductType.ENTERPRISE] / 100,
    }


def next_stage(stage: DealStage | str) -> DealStage | None:
    """Stage after ``stage``. Deals are never advanced into closed_lost."""
    index = STAGE_ORDER.index(DealStage(stage)) + 1
    if index >= len(STAGE_ORDER) or STAGE_ORDER[index] == DealStage.CLOSED_LOST:
        return None
    return STAGE_ORDER[index]


def summarize_deals(deals: Iterable[EnterpriseDeal]) -> DealStats:
    deals = list(deals)
    open_deals = [d for d in deals if d["stage"] in OPEN_STAGES]
    won = [d for d in deals if d["stage"] == DealStage.CLOSED_WON]
    lost = [d for d in deals if d["stage"] == DealStage.CLOSED_LOST]
    closed = len(won) + len(lost)

    return {
        "total_deals": len(deals),
        "open_deals": len(open_deals),
        "won_deals": len(won),
        "lost_deals": len(lost),
        "total_pipeline_value": sum(d["deal_value"] for d in open_deals),
        "total_won_value": sum(d["deal_value"] for d in won),
        "avg_deal_size": sum(d["deal_value"] for d in deals) / len(deals) if deals else 0,
        "conversion_rate": len(won) / closed * 100 if closed else 0,
        "deals_by_stage": {stage.value: sum(1 for d in deals if d["stage"] == stage) for stage in DealStage},
    }
