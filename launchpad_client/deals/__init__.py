"""Deals API client - enterprise pipeline."""

from launchpad_client.deals.client import DealsClient
from launchpad_client.deals.schemas import (
    ENTERPRISE_TIERS,
    OPEN_STAGES,
    CreateDealInput,
    DealStage,
    DealStats,
    EnterpriseDeal,
    EnterpriseTier,
    TierPricing,
    UpdateDealInput,
    calculate_deal_value,
    next_stage,
    summarize_deals,
)

__all__ = [
    "DealsClient",
    "EnterpriseDeal",
    "DealStats",
    "DealStage",
    "EnterpriseTier",
    "TierPricing",
    "ENTERPRISE_TIERS",
    "OPEN_STAGES",
    "CreateDealInput",
    "UpdateDealInput",
    "calculate_deal_value",
    "next_stage",
    "summarize_deals",
]
