"""Route guards - decide between protected content, a wait, or a redirect."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Protocol

from loguru import logger

from app.auth.contexts import AdminAuthContext, InfluencerManagerContext, InfluencerPortalContext, PartnerContext
from launchpad_client.accounts import OrganizationRole
from launchpad_client.domains import AuthDomain, get_domain
from launchpad_client.navigation import Navigator

ADMIN_LOGIN_PATH = get_domain(AuthDomain.ADMIN).login_route
CREATE_ORGANIZATION_PATH = "/onboarding/create-organization"
HOME_PATH = "/"


class GuardState(StrEnum):
    LOADING = "loading"
    AUTHORIZED = "authorized"
    UNAUTHORIZED = "unauthorized"


@dataclass(frozen=True)
class GuardDecision:
    state: GuardState
    redirect_to: str | None = None
    message: str | None = None

    @property
    def allowed(self) -> bool:
        return self.state == GuardState.AUTHORIZED


AUTHORIZED = GuardDecision(GuardState.AUTHORIZED)
LOADING = GuardDecision(GuardState.LOADING)


class AuthSource(Protocol):
    @property
    def is_loading(self) -> bool: ...

    @property
    def is_authenticated(self) -> bool: ...


class PrivilegeSource:
    """Adapts a context plus a privilege check to ``AuthSource``."""

    def __init__(self, context: Any, predicate: Callable[[Any], bool]):
        self._context = context
        self._predicate = predicate

    @property
    def is_loading(self) -> bool:
        return self._context.is_loading

    @property
    def is_authenticated(self) -> bool:
        return bool(self._predicate(self._context))


class Guard(ABC):
    @abstractmethod
    def evaluate(self) -> GuardDecision: ...

    def enforce(self, navigator: Navigator) -> GuardDecision:
        """Evaluate and follow the redirect, if any."""
        decision = self.evaluate()
        if decision.redirect_to is not None:
            navigator.redirect(decision.redirect_to)
        return decision


class RouteGuard(Guard):
    """Grants access if any source, in priority order, is authenticated.

    An authorized source wins even while later sources are still loading.
    With no winner, any loading source makes the decision LOADING.
    """

    def __init__(self, sources: Sequence[AuthSource], login_path: str):
        self.sources = list(sources)
        self.login_path = login_path

    def evaluate(self) -> GuardDecision:
        for source in self.sources:
            if source.is_authenticated:
                return AUTHORIZED
        if any(source.is_loading for source in self.sources):
            return LOADING
        logger.debug("Guard: no session, redirecting to {}", self.login_path)
        return GuardDecision(GuardState.UNAUTHORIZED, redirect_to=self.login_path)


class ProtectedRoute(RouteGuard):
    """Admin area. Members without an organization go to onboarding."""

    def __init__(self, admin: AdminAuthContext):
        super().__init__([admin], ADMIN_LOGIN_PATH)
        self.admin = admin

    def evaluate(self) -> GuardDecision:
        if self.admin.is_loading:
            return LOADING
        decision = super().evaluate()
        if decision.allowed and not self.admin.organization:
            return GuardDecision(GuardState.UNAUTHORIZED, redirect_to=CREATE_ORGANIZATION_PATH)
        return decision


def protected_route(admin: AdminAuthContext) -> ProtectedRoute:
    return ProtectedRoute(admin)


def influencer_manager_route(admin: AdminAuthContext, manager: InfluencerManagerContext) -> RouteGuard:
    """Admins with influencer access pass first; otherwise an IM session."""
    return RouteGuard(
        [PrivilegeSource(admin, lambda ctx: ctx.can_access_influencers), manager],
        get_domain(AuthDomain.INFLUENCER_MANAGER).login_route,
    )


def influencer_portal_route(portal: InfluencerPortalContext) -> RouteGuard:
    return RouteGuard([portal], get_domain(AuthDomain.INFLUENCER_PORTAL).login_route)


def partner_route(partner: PartnerContext) -> RouteGuard:
    return RouteGuard([partner], get_domain(AuthDomain.PARTNER).login_route)


class RoleGuard(Guard):
    """Only the given organization roles pass. Owners always pass."""

    def __init__(self, admin: AdminAuthContext, allowed_roles: Iterable[OrganizationRole | str], fallback_path: str = HOME_PATH):
        self.admin = admin
        self.allowed_roles = list(allowed_roles)
        self.fallback_path = fallback_path

    def evaluate(self) -> GuardDecision:
        if self.admin.is_loading:
            return LOADING
        if not self.admin.is_authenticated:
            return GuardDecision(GuardState.UNAUTHORIZED, redirect_to=ADMIN_LOGIN_PATH)
        if self.admin.is_owner or self.admin.has_role(self.allowed_roles):
            return AUTHORIZED
        return GuardDecision(GuardState.UNAUTHORIZED, redirect_to=self.fallback_path)


class PermissionGuard(Guard):
    """Owner, admin or single-permission gate.

    Denials carry an access-denied message, or redirect home when
    ``show_access_denied`` is off.
    """

    OWNER_ONLY_MESSAGE = "Only organization owners have access to this page."
    ADMIN_ONLY_MESSAGE = "Only administrators have access to this page."
    PERMISSION_MESSAGE = "You don't have permission for this page."

    def __init__(
        self,
        admin: AdminAuthContext,
        permission: str | None = None,
        owner_only: bool = False,
        admin_only: bool = False,
        show_access_denied: bool = True,
    ):
        self.admin = admin
        self.permission = permission
        self.owner_only = owner_only
        self.admin_only = admin_only
        self.show_access_denied = show_access_denied

    def _deny(self, message: str) -> GuardDecision:
        if self.show_access_denied:
            return GuardDecision(GuardState.UNAUTHORIZED, message=message)
        return GuardDecision(GuardState.UNAUTHORIZED, redirect_to=HOME_PATH)

    def evaluate(self) -> GuardDecision:
        if self.admin.is_loading:
            return LOADING
        if self.owner_only and not self.admin.is_owner:
            return self._deny(self.OWNER_ONLY_MESSAGE)
        if self.admin_only and not self.admin.is_admin:
            return self._deny(self.ADMIN_ONLY_MESSAGE)
        if self.permission and not self.admin.has_permission(self.permission):
            return self._deny(self.PERMISSION_MESSAGE)
        return AUTHORIZED
