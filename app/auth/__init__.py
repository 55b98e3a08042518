"""Auth contexts, permissions and route guards."""

from app.auth.contexts import (
    AdminAuthContext,
    InfluencerManagerContext,
    InfluencerPortalContext,
    PartnerContext,
    SessionContext,
)
from app.auth.guards import (
    AuthSource,
    Guard,
    GuardDecision,
    GuardState,
    PermissionGuard,
    PrivilegeSource,
    ProtectedRoute,
    RoleGuard,
    RouteGuard,
    influencer_manager_route,
    influencer_portal_route,
    partner_route,
    protected_route,
)
from app.auth.permissions import (
    ORG_ROLE_PERMISSIONS,
    ROLE_PERMISSIONS,
    ROLE_SENSITIVE_PERMISSIONS,
    has_permission,
    has_sensitive_permission,
)

__all__ = [
    "SessionContext",
    "AdminAuthContext",
    "InfluencerManagerContext",
    "InfluencerPortalContext",
    "PartnerContext",
    "AuthSource",
    "Guard",
    "GuardDecision",
    "GuardState",
    "PrivilegeSource",
    "RouteGuard",
    "ProtectedRoute",
    "RoleGuard",
    "PermissionGuard",
    "protected_route",
    "influencer_manager_route",
    "influencer_portal_route",
    "partner_route",
    "ROLE_PERMISSIONS",
    "ROLE_SENSITIVE_PERMISSIONS",
    "ORG_ROLE_PERMISSIONS",
    "has_permission",
    "has_sensitive_permission",
]
