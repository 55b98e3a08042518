"""Influencer manager API client."""

from launchpad_client.influencer_manager.client import InfluencerManagerClient
from launchpad_client.influencer_manager.schemas import (
    InfluencerManagerLoginInput,
    InfluencerManagerLoginResponse,
    InfluencerManagerUser,
)

__all__ = [
    "InfluencerManagerClient",
    "InfluencerManagerUser",
    "InfluencerManagerLoginInput",
    "InfluencerManagerLoginResponse",
]
