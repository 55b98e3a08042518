"""Partners API client - admin side of the creator program."""

from launchpad_client.partners.client import PartnersClient
from launchpad_client.partners.schemas import (
    DEFAULT_COMMISSIONS,
    ApprovePartnerInput,
    CreatePartnerInput,
    CreatePayoutInput,
    CreatorType,
    Partner,
    PartnerFilters,
    PartnerReferral,
    PartnerStatus,
    PendingPayout,
    PendingPayouts,
    ProductType,
    UpdatePartnerInput,
    normalize_partner,
)

__all__ = [
    "PartnersClient",
    "Partner",
    "PartnerReferral",
    "PendingPayout",
    "PendingPayouts",
    "CreatorType",
    "PartnerStatus",
    "ProductType",
    "DEFAULT_COMMISSIONS",
    "PartnerFilters",
    "CreatePartnerInput",
    "UpdatePartnerInput",
    "ApprovePartnerInput",
    "CreatePayoutInput",
    "normalize_partner",
]
