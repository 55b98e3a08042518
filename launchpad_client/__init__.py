"""LaunchPad admin API client package."""

from launchpad_client.accounts import AccountsClient
from launchpad_client.app_launch import AppLaunchClient
from launchpad_client.base import BaseClient, safe_request, set_api_config
from launchpad_client.deals import DealsClient
from launchpad_client.domains import DOMAINS, AuthDomain, DomainConfig, get_domain
from launchpad_client.errors import ApiError, ConfigurationError, TransportError, UnauthorizedError
from launchpad_client.health import HealthClient
from launchpad_client.influencer_manager import InfluencerManagerClient
from launchpad_client.influencer_portal import InfluencerPortalClient
from launchpad_client.influencers import InfluencersClient
from launchpad_client.login_audit import LoginAuditClient
from launchpad_client.navigation import CallbackNavigator, Navigator, RecordingNavigator
from launchpad_client.partner_portal import PartnerPortalClient
from launchpad_client.partners import PartnersClient
from launchpad_client.sales import SalesClient
from launchpad_client.session import DuckDBStorage, MemoryStorage, Session, SessionUser, TokenStore
from launchpad_client.tracking_errors import TrackingErrorsClient

__all__ = [
    # Base
    "BaseClient",
    "safe_request",
    "set_api_config",
    # Domains
    "AuthDomain",
    "DomainConfig",
    "DOMAINS",
    "get_domain",
    # Errors
    "ApiError",
    "UnauthorizedError",
    "TransportError",
    "ConfigurationError",
    # Session
    "Session",
    "SessionUser",
    "TokenStore",
    "MemoryStorage",
    "DuckDBStorage",
    # Navigation
    "Navigator",
    "CallbackNavigator",
    "RecordingNavigator",
    # Clients
    "AccountsClient",
    "InfluencersClient",
    "AppLaunchClient",
    "LoginAuditClient",
    "TrackingErrorsClient",
    "HealthClient",
    "SalesClient",
    "InfluencerManagerClient",
    "InfluencerPortalClient",
    "PartnerPortalClient",
    "PartnersClient",
    "DealsClient",
]
