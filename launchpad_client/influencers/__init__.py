"""Influencers API client - admin pipeline."""

from launchpad_client.influencers.client import InfluencersClient
from launchpad_client.influencers.schemas import (
    CreateInfluencerInput,
    Influencer,
    InfluencerCategory,
    InfluencerStatus,
    UpdateInfluencerInput,
    calculate_promo_reach,
)

__all__ = [
    "InfluencersClient",
    "Influencer",
    "InfluencerStatus",
    "InfluencerCategory",
    "CreateInfluencerInput",
    "UpdateInfluencerInput",
    "calculate_promo_reach",
]
