"""Influencer pipeline schemas."""

import math
from enum import StrEnum
from typing import TypedDict

from pydantic import BaseModel


class InfluencerStatus(StrEnum):
    """Pipeline stage."""

    PENDING = "pending"
    CONTACTED = "contacted"
    APPROVED = "approved"
    REJECTED = "rejected"


class InfluencerCategory(StrEnum):
    FITNESS = "fitness"
    NUTRITION = "nutrition"
    LIFESTYLE = "lifestyle"
    ATHLETE = "athlete"
    COACH = "coach"
    WELLNESS = "wellness"
    CROSSFIT = "crossfit"
    BODYBUILDING = "bodybuilding"
    YOGA = "yoga"
    OTHER = "other"


class Influencer(TypedDict):
    id: str
    instagram_handle: str
    full_name: str
    email: str | None
    follower_count: int
    engagement_rate: float  # percent, 3.5 means 3.5%
    category: str
    status: str
    contact_person: str | None
    notes: str | None
    promo_code: str | None
    created_at: str
    updated_at: str


class CreateInfluencerInput(BaseModel):
    instagram_handle: str
    full_name: str
    email: str | None = None
    follower_count: int
    engagement_rate: float
    category: InfluencerCategory
    contact_person: str | None = None
    notes: str | None = None
    promo_code: str | None = None


class UpdateInfluencerInput(BaseModel):
    """Partial update; only fields that are set are sent."""

    instagram_handle: str | None = None
    full_name: str | None = None
    email: str | None = None
    follower_count: int | None = None
    engagement_rate: float | None = None
    category: InfluencerCategory | None = None
    status: InfluencerStatus | None = None
    contact_person: str | None = None
    notes: str | None = None
    promo_code: str | None = None


def calculate_promo_reach(follower_count: int, engagement_rate: float) -> int:
    """Estimated reach: followers times engagement percentage."""
    return math.floor(follower_count * (engagement_rate / 100) + 0.5)
