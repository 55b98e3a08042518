"""Query cache package."""

from app.query.cache import (
    MutationResult,
    QueryClient,
    QueryKey,
    QueryResult,
    QueryStatus,
    key_startswith,
    make_key,
)
from app.query.keys import (
    AppLaunchKeys,
    DealKeys,
    HealthKeys,
    InfluencerKeys,
    InfluencerPortalKeys,
    LoginAuditKeys,
    PartnerKeys,
    PartnerPortalKeys,
    SalesKeys,
    TrackingErrorKeys,
)

__all__ = [
    # Cache
    "QueryClient",
    "QueryKey",
    "QueryResult",
    "QueryStatus",
    "MutationResult",
    "make_key",
    "key_startswith",
    # Keys
    "InfluencerKeys",
    "AppLaunchKeys",
    "LoginAuditKeys",
    "TrackingErrorKeys",
    "HealthKeys",
    "SalesKeys",
    "InfluencerPortalKeys",
    "PartnerPortalKeys",
    "PartnerKeys",
    "DealKeys",
]
