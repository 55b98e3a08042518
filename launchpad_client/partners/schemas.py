"""Partner admin schemas - creators, referrals, commission payouts."""

from enum import StrEnum
from typing import Any, Literal, TypedDict

from pydantic import BaseModel

from launchpad_client.influencers.schemas import InfluencerCategory, InfluencerStatus


class CreatorType(StrEnum):
    """Kind of creator in the unified partner table."""

    PARTNER = "partner"
    INFLUENCER = "influencer"
    BETA_PARTNER = "beta_partner"


class PartnerStatus(StrEnum):
    PENDING_APPROVAL = "pending_approval"
    ACTIVE = "active"
    INACTIVE = "inactive"
    TERMINATED = "terminated"


class ProductType(StrEnum):
    APP = "app"
    COACH = "coach"
    ENTERPRISE = "enterprise"


# Percent of revenue, per product, unless overridden on the creator
DEFAULT_COMMISSIONS = {
    ProductType.APP: 20,
    ProductType.COACH: 20,
    ProductType.ENTERPRISE: 20,
}

PartnerType = Literal["affiliate", "other"]


class ProductCommission(TypedDict):
    product: str
    commission_percent: float
    enabled: bool


class Partner(TypedDict, total=False):
    id: str
    name: str
    email: str
    referral_code: str
    partner_type: str
    commission_percent: float
    instagram_handle: str
    follower_count: int
    payout_method: str
    payout_details: dict[str, str]
    status: str
    created_by: str
    total_referrals: int
    total_earned: float
    total_paid: float
    counterparty_id: str
    notes: str
    created_at: str
    referrals_this_month: int
    last_referral_at: str
    confirmed_referrals: int
    creator_type: str
    # Influencer creators only
    tiktok_handle: str
    youtube_handle: str
    engagement_rate: float
    category: str
    contact_person: str
    influencer_status: str
    # Contract
    contract_id: str
    contract_signed_at: str
    contract_status: str
    contract_pdf_url: str
    # Products
    products: list[str]
    product_commissions: list[ProductCommission]
    enterprise_deals_count: int
    enterprise_deals_value: float


class PartnerReferral(TypedDict, total=False):
    id: str
    partner_id: str
    partner_name: str
    user_id: str
    user_email: str
    subscription_revenue: float
    commission_amount: float
    commission_status: str  # pending | confirmed | paid
    referral_date: str
    payout_id: str


class PendingPayout(TypedDict, total=False):
    partner_id: str
    partner_name: str
    referral_code: str
    email: str
    revolut_email: str
    iban: str
    counterparty_id: str
    referral_count: int
    total_amount: float
    eligible: bool
    missing_payout_info: bool


class PendingPayouts(TypedDict):
    pending_payouts: list[PendingPayout]
    total_pending: float
    min_payout: float


class CreatePartnerResponse(TypedDict):
    success: bool
    partner: Partner
    generated_password: str
    referral_code: str


class PayoutCreated(TypedDict):
    success: bool
    payout_id: str
    amount: float
    referral_count: int


class RevolutPayoutSent(TypedDict):
    success: bool
    amount: float
    currency: str
    referral_count: int
    transfer_id: str
    partner_name: str


class BatchPayoutsSent(TypedDict):
    success: bool
    payouts_sent: int
    successful: int
    failed: int
    total_amount: float


class PartnerFilters(BaseModel):
    creator_type: CreatorType | None = None
    status: PartnerStatus | None = None


class CreatePartnerInput(BaseModel):
    name: str
    email: str
    referral_code: str | None = None
    partner_type: PartnerType | None = None
    commission_percent: float | None = None
    instagram_handle: str | None = None
    follower_count: int | None = None
    payout_method: str | None = None
    notes: str | None = None
    status: Literal["pending_approval", "active"] | None = None
    created_by: str | None = None
    creator_type: CreatorType | None = None
    tiktok_handle: str | None = None
    youtube_handle: str | None = None
    engagement_rate: float | None = None
    category: InfluencerCategory | None = None
    contact_person: str | None = None
    influencer_status: InfluencerStatus | None = None
    products: list[ProductType] | None = None
    product_commissions: list[dict[str, Any]] | None = None


class UpdatePartnerInput(BaseModel):
    """Partial update; only fields that are set are sent."""

    name: str | None = None
    email: str | None = None
    referral_code: str | None = None
    partner_type: PartnerType | None = None
    commission_percent: float | None = None
    instagram_handle: str | None = None
    follower_count: int | None = None
    payout_method: str | None = None
    notes: str | None = None
    status: PartnerStatus | None = None
    creator_type: CreatorType | None = None
    tiktok_handle: str | None = None
    youtube_handle: str | None = None
    engagement_rate: float | None = None
    category: InfluencerCategory | None = None
    contact_person: str | None = None
    influencer_status: InfluencerStatus | None = None
    products: list[ProductType] | None = None
    product_commissions: list[dict[str, Any]] | None = None


class ApprovePartnerInput(BaseModel):
    partner_id: str
    approved: bool
    rejection_reason: str | None = None


class CreatePayoutInput(BaseModel):
    partner_id: str
    period_start: str
    period_end: str


def normalize_partner(partner: dict) -> Partner:
    """Rows from the statistics view carry ``partner_id`` instead of ``id``.

    Older rows have no ``creator_type``; they are partners.
    """
    return {
        **partner,
        "id": partner.get("id") or partner.get("partner_id") or "",
        "creator_type": partner.get("creator_type") or CreatorType.PARTNER.value,
    }
