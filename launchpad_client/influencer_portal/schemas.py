"""Influencer portal schemas - creator self-service."""

from typing import Literal, TypedDict

from pydantic import BaseModel

CURRENCY = "CHF"


class InfluencerProfile(TypedDict, total=False):
    id: str
    name: str
    email: str
    instagram_handle: str
    tiktok_handle: str
    youtube_handle: str
    followers: int
    category: str
    commission_rate: float
    status: str
    joined_date: str
    profile_image: str


class InfluencerStats(TypedDict):
    total_earnings: float
    pending_earnings: float
    total_conversions: int
    this_month_conversions: int
    conversion_rate: float
    total_clicks: int
    active_campaigns: int


class InfluencerCampaign(TypedDict, total=False):
    id: str
    name: str
    brand: str
    start_date: str
    end_date: str
    status: str
    commission_type: str
    commission_value: float
    conversions: int
    earnings: float
    tracking_link: str


class EarningsEntry(TypedDict, total=False):
    id: str
    campaign_id: str
    campaign_name: str
    date: str
    amount: float
    type: str
    status: str
    description: str


class InfluencerPayout(TypedDict, total=False):
    id: str
    amount: float
    status: str
    request_date: str
    process_date: str
    payment_method: str
    reference: str


class EarningsChartData(TypedDict):
    month: str
    earnings: float
    conversions: int


class PortalLoginResponse(TypedDict):
    token: str
    influencer: InfluencerProfile


class PortalLoginInput(BaseModel):
    email: str
    code: str


class UpdateInfluencerPayoutDetailsInput(BaseModel):
    payment_method: Literal["bank_transfer", "paypal"]
    bank_name: str | None = None
    iban: str | None = None
    account_holder: str | None = None
    paypal_email: str | None = None

