"""Partner portal schemas - referral partners."""

from typing import Literal, TypedDict

from pydantic import BaseModel

MINIMUM_PAYOUT = 50  # CHF
CURRENCY = "CHF"

PayoutMethod = Literal["revolut", "bank_transfer"]


class PartnerProfile(TypedDict, total=False):
    id: str
    name: str
    email: str
    referral_code: str
    commission_percent: float
    instagram_handle: str
    payout_method: str
    payout_details: dict[str, str]
    status: str
    created_at: str


class PartnerStats(TypedDict):
    total_referrals: int
    confirmed_referrals: int
    pending_referrals: int
    total_earned: float
    total_paid: float
    pending_payout: float
    referrals_this_month: int
    earnings_this_month: float
    conversion_rate: float


class ReferralLink(TypedDict):
    id: str
    code: str
    url: str
    clicks: int
    conversions: int
    created_at: str


class PartnerReferralView(TypedDict, total=False):
    id: str
    user_email: str
    subscription_type: str
    revenue: float
    commission: float
    status: str
    referral_date: str
    paid_at: str


class PayoutRequest(TypedDict, total=False):
    id: str
    amount: float
    currency: str
    status: str
    payout_method: str
    referral_count: int
    period_start: str
    period_end: str
    requested_at: str
    processed_at: str
    rejection_reason: str


class PayoutEligibility(TypedDict):
    eligible: bool
    available_amount: float
    minimum_payout: float
    missing_payout_info: bool


class EarningsDataPoint(TypedDict):
    month: str  # "2024-01"
    referrals: int
    earnings: float


class PartnerLoginResponse(TypedDict):
    token: str
    partner: PartnerProfile


class PartnerLoginInput(BaseModel):
    email: str
    referral_code: str


class CreatePayoutRequestInput(BaseModel):
    amount: float
    payout_method: PayoutMethod


class UpdatePayoutDetailsInput(BaseModel):
    payout_method: PayoutMethod
    revolut_email: str | None = None
    iban: str | None = None
    bic: str | None = None
    bank_country: str | None = None
