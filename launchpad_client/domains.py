"""Auth domains - independent session namespaces with their own keys and login routes."""

from dataclasses import dataclass
from enum import StrEnum


class AuthDomain(StrEnum):
    """Auth domains served by the backend."""

    ADMIN = "admin"
    SALES = "sales"
    INFLUENCER_MANAGER = "influencer-manager"
    INFLUENCER_PORTAL = "influencer-portal"
    PARTNER = "partner"


@dataclass(frozen=True)
class DomainConfig:
    """Per-domain storage keys, API prefix and login route."""

    domain: AuthDomain
    path_prefix: str
    login_route: str
    token_key: str | None = None
    user_key: str | None = None

    @property
    def has_sessions(self) -> bool:
        """Whether the domain stores per-user tokens."""
        return self.token_key is not None and self.user_key is not None


DOMAINS: dict[AuthDomain, DomainConfig] = {
    AuthDomain.ADMIN: DomainConfig(
        domain=AuthDomain.ADMIN,
        path_prefix="admin",
        login_route="/login",
        token_key="admin_token",
        user_key="admin_user",
    ),
    AuthDomain.SALES: DomainConfig(
        domain=AuthDomain.SALES,
        path_prefix="sales",
        login_route="/login",
    ),
    AuthDomain.INFLUENCER_MANAGER: DomainConfig(
        domain=AuthDomain.INFLUENCER_MANAGER,
        path_prefix="influencer-manager",
        login_route="/influencers/login",
        token_key="influencer_manager_token",
        user_key="influencer_manager_user",
    ),
    AuthDomain.INFLUENCER_PORTAL: DomainConfig(
        domain=AuthDomain.INFLUENCER_PORTAL,
        path_prefix="influencer-portal",
        login_route="/influencer/login",
        token_key="influencer_portal_token",
        user_key="influencer_portal_data",
    ),
    AuthDomain.PARTNER: DomainConfig(
        domain=AuthDomain.PARTNER,
        path_prefix="partner",
        login_route="/partner/login",
        token_key="partner_token",
        user_key="partner_user",
    ),
}


def get_domain(domain: AuthDomain | str) -> DomainConfig:
    """Look up domain config by enum or value."""
    return DOMAINS[AuthDomain(domain)]
