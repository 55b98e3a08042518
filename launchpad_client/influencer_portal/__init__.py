"""Influencer portal API client."""

from launchpad_client.influencer_portal.client import InfluencerPortalClient
from launchpad_client.influencer_portal.schemas import (
    CURRENCY,
    EarningsChartData,
    EarningsEntry,
    InfluencerCampaign,
    InfluencerPayout,
    InfluencerProfile,
    InfluencerStats,
    PortalLoginInput,
    UpdateInfluencerPayoutDetailsInput,
)

__all__ = [
    "InfluencerPortalClient",
    "CURRENCY",
    "InfluencerProfile",
    "InfluencerStats",
    "InfluencerCampaign",
    "EarningsEntry",
    "InfluencerPayout",
    "EarningsChartData",
    "PortalLoginInput",
    "UpdateInfluencerPayoutDetailsInput",
]
