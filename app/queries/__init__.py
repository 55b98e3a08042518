"""Query classes - cached reads and invalidating writes per resource."""

from app.queries.app_launch import AppLaunchQueries, ChecklistProgress, summarize_checklist
from app.queries.deals import DealQueries
from app.queries.health import HealthQueries
from app.queries.influencer_portal import InfluencerPortalQueries
from app.queries.influencers import InfluencerQueries
from app.queries.login_audit import LoginAuditQueries
from app.queries.partner_portal import PartnerPortalQueries
from app.queries.partners import PartnerQueries
from app.queries.sales import SalesQueries
from app.queries.tracking_errors import TrackingErrorQueries

__all__ = [
    "InfluencerQueries",
    "AppLaunchQueries",
    "ChecklistProgress",
    "summarize_checklist",
    "LoginAuditQueries",
    "TrackingErrorQueries",
    "HealthQueries",
    "SalesQueries",
    "InfluencerPortalQueries",
    "PartnerPortalQueries",
    "PartnerQueries",
    "DealQueries",
]
