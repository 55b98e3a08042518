"""Partner portal API client."""

from launchpad_client.partner_portal.client import PartnerPortalClient
from launchpad_client.partner_portal.schemas import (
    CURRENCY,
    MINIMUM_PAYOUT,
    CreatePayoutRequestInput,
    PartnerLoginInput,
    PartnerProfile,
    PartnerStats,
    PayoutEligibility,
    PayoutRequest,
    ReferralLink,
    UpdatePayoutDetailsInput,
)

__all__ = [
    "PartnerPortalClient",
    "CURRENCY",
    "MINIMUM_PAYOUT",
    "PartnerProfile",
    "PartnerStats",
    "ReferralLink",
    "PayoutRequest",
    "PayoutEligibility",
    "PartnerLoginInput",
    "CreatePayoutRequestInput",
    "UpdatePayoutDetailsInput",
]
