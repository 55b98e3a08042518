"""Auth contexts - in-memory view of one domain's stored session.

A context starts out loading, resolves from its ``TokenStore`` and follows
the store afterwards: when the store's generation moves (login elsewhere, a
401 cleared it) the context re-reads it on next access.
"""

from collections.abc import Iterable
from typing import Any

from loguru import logger

from launchpad_client import safe_request
from launchpad_client.accounts import AccountResponse, AccountsClient, LoginInput, OrganizationRole
from launchpad_client.errors import ApiError
from launchpad_client.influencer_manager import InfluencerManagerClient, InfluencerManagerLoginInput
from launchpad_client.influencer_portal import InfluencerPortalClient, PortalLoginInput
from launchpad_client.login_audit import CreateLoginAuditInput, LoginAuditClient, LoginAuditStatus
from launchpad_client.partner_portal import PartnerLoginInput, PartnerPortalClient
from launchpad_client.session import Session, SessionUser, TokenStore
from app.auth import permissions as perms


class SessionContext:
    """Session state for one auth domain."""

    # Key holding the user record in the login response
    user_field = "user"

    def __init__(self, store: TokenStore, client: Any):
        self._store = store
        self._client = client
        self._loading = True
        self._token: str | None = None
        self._user: SessionUser | None = None
        self._generation: int | None = None

    def _load(self) -> None:
        session = self._store.get()
        self._token = session.token if session else None
        self._user = session.user if session else None
        self._generation = self._store.generation

    def _sync(self) -> None:
        if not self._loading and self._generation != self._store.generation:
            logger.debug("{}: store changed, reloading session", self._store.domain)
            self._load()

    @property
    def is_loading(self) -> bool:
        return self._loading

    @property
    def token(self) -> str | None:
        self._sync()
        return self._token

    @property
    def user(self) -> SessionUser | None:
        self._sync()
        return self._user

    @property
    def is_authenticated(self) -> bool:
        self._sync()
        return bool(self._token and self._user)

    async def resolve(self) -> None:
        """Load whatever session is stored. Ends the loading state."""
        self._load()
        self._loading = False
        logger.debug("{}: resolved (authenticated={})", self._store.domain, self.is_authenticated)

    async def _login(self, data: Any) -> SessionUser:
        response = await self._client.login(data)
        session = Session(token=response["token"], user=SessionUser.model_validate(response[self.user_field]))
        self._store.set(session)
        self._load()
        self._loading = False
        logger.info("{}: logged in as {}", self._store.domain, session.user.email or session.user.id)
        return session.user

    def logout(self) -> None:
        self._store.clear()
        self._load()
        logger.info("{}: logged out", self._store.domain)


class InfluencerManagerContext(SessionContext):
    def __init__(self, store: TokenStore, client: InfluencerManagerClient):
        super().__init__(store, client)

    async def login(self, email: str, password: str) -> SessionUser:
        return await self._login(InfluencerManagerLoginInput(email=email, password=password))


class InfluencerPortalContext(SessionContext):
    user_field = "influencer"

    def __init__(self, store: TokenStore, client: InfluencerPortalClient):
        super().__init__(store, client)

    @property
    def influencer(self) -> SessionUser | None:
        return self.user

    async def login(self, email: str, code: str) -> SessionUser:
        return await self._login(PortalLoginInput(email=email, code=code))


class PartnerContext(SessionContext):
    user_field = "partner"

    def __init__(self, store: TokenStore, client: PartnerPortalClient):
        super().__init__(store, client)

    @property
    def partner(self) -> SessionUser | None:
        return self.user

    async def login(self, email: str, referral_code: str) -> SessionUser:
        return await self._login(PartnerLoginInput(email=email, referral_code=referral_code))


class AdminAuthContext(SessionContext):
    """Admin session plus the current organization and the member's role in it."""

    def __init__(self, store: TokenStore, client: AccountsClient, audit: LoginAuditClient | None = None):
        super().__init__(store, client)
        self._audit = audit
        self._account: AccountResponse | None = None

    def _load(self) -> None:
        super()._load()
        self._account = None

    async def _load_account(self) -> None:
        if self.is_authenticated:
            self._account = await safe_request(self._client.me())

    async def resolve(self) -> None:
        """Load the stored session and its account. Loading lasts until both are in."""
        self._load()
        await self._load_account()
        self._loading = False
        logger.debug("{}: resolved (authenticated={})", self._store.domain, self.is_authenticated)

    async def login(self, email: str, password: str) -> SessionUser:
        try:
            user = await self._login(LoginInput(email=email, password=password))
        except ApiError as e:
            status = LoginAuditStatus.FAILED_NOT_FOUND if e.status_code == 404 else LoginAuditStatus.FAILED_WRONG_PASSWORD
            await self._record_attempt(email, status)
            raise
        await self._record_attempt(email, LoginAuditStatus.SUCCESS, user.name)
        await self._load_account()
        return user

    async def _record_attempt(self, email: str, status: LoginAuditStatus, account_name: str | None = None) -> None:
        # Auditing never blocks a login
        if self._audit is None:
            return
        await safe_request(
            self._audit.log_login_attempt(CreateLoginAuditInput(email=email, status=status, account_name=account_name))
        )

    async def switch_organization(self, organization_id: str) -> None:
        self._account = await self._client.switch_organization(organization_id)
        logger.info("Switched to organization {}", organization_id)

    # ========== Organization ==========

    @property
    def account(self) -> AccountResponse | None:
        self._sync()
        return self._account

    @property
    def organization(self) -> dict | None:
        return (self.account or {}).get("organization")

    @property
    def membership(self) -> dict | None:
        return (self.account or {}).get("membership")

    @property
    def organizations(self) -> list[dict]:
        return (self.account or {}).get("organizations") or []

    # ========== Roles & permissions ==========

    @property
    def role(self) -> OrganizationRole | None:
        role = (self.membership or {}).get("role")
        try:
            return OrganizationRole(role) if role else None
        except ValueError:
            logger.warning("Unknown organization role: {}", role)
            return None

    @property
    def is_owner(self) -> bool:
        return self.role == OrganizationRole.OWNER

    @property
    def is_admin(self) -> bool:
        return self.role in (OrganizationRole.OWNER, OrganizationRole.ADMIN)

    @property
    def is_super_admin(self) -> bool:
        return self.is_owner

    @property
    def can_access_crm(self) -> bool:
        return self.is_admin

    @property
    def can_access_influencers(self) -> bool:
        return self.is_authenticated and self.is_admin

    @property
    def permissions(self) -> list[str]:
        return perms.permissions_for(self.role)

    @property
    def sensitive_permissions(self) -> list[str]:
        return perms.sensitive_permissions_for(self.role)

    def has_permission(self, permission: str) -> bool:
        return perms.has_permission(self.permissions, permission, self.is_owner)

    def has_sensitive_permission(self, permission: str) -> bool:
        return perms.has_sensitive_permission(self.sensitive_permissions, permission, self.is_owner)

    def has_role(self, roles: OrganizationRole | str | Iterable[OrganizationRole | str]) -> bool:
        role = self.role
        if role is None:
            return False
        if isinstance(roles, str):
            roles = [roles]
        return role in {OrganizationRole(r) for r in roles}
