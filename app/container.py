"""Dependency Injection container - initialized at app startup."""

from loguru import logger

from app.auth.contexts import AdminAuthContext, InfluencerManagerContext, InfluencerPortalContext, PartnerContext
from app.queries import (
    AppLaunchQueries,
    DealQueries,
    HealthQueries,
    InfluencerPortalQueries,
    InfluencerQueries,
    LoginAuditQueries,
    PartnerPortalQueries,
    PartnerQueries,
    SalesQueries,
    TrackingErrorQueries,
)
from app.query import QueryClient
from launchpad_client import (
    AccountsClient,
    AppLaunchClient,
    AuthDomain,
    BaseClient,
    DealsClient,
    DuckDBStorage,
    HealthClient,
    InfluencerManagerClient,
    InfluencerPortalClient,
    InfluencersClient,
    LoginAuditClient,
    PartnerPortalClient,
    PartnersClient,
    RecordingNavigator,
    SalesClient,
    TokenStore,
    TrackingErrorsClient,
)
from launchpad_client.navigation import Navigator
from launchpad_client.session import KeyValueStorage
from settings import QUERY_STALE_TIME, STORAGE_PATH


class Container:
    """Application DI container - one set of stores, clients, contexts and queries.

    Build it, ``await open()`` once, ``await aclose()`` on shutdown::

        async with Container() as c:
            await c.admin.resolve()
            result = await c.influencer_queries.influencers()
    """

    def __init__(
        self,
        storage: KeyValueStorage | None = None,
        navigator: Navigator | None = None,
        stale_time: float = QUERY_STALE_TIME,
        **client_options,
    ):
        self.storage = storage if storage is not None else DuckDBStorage(STORAGE_PATH)
        self.navigator = navigator if navigator is not None else RecordingNavigator()
        self.query_client = QueryClient(stale_time=stale_time)

        # Stores (one per auth domain with sessions)
        self.admin_store = TokenStore(self.storage, AuthDomain.ADMIN)
        self.manager_store = TokenStore(self.storage, AuthDomain.INFLUENCER_MANAGER)
        self.portal_store = TokenStore(self.storage, AuthDomain.INFLUENCER_PORTAL)
        self.partner_store = TokenStore(self.storage, AuthDomain.PARTNER)

        # Clients (with injected stores)
        self.accounts = AccountsClient(self.admin_store, self.navigator, **client_options)
        self.influencers = InfluencersClient(self.admin_store, self.navigator, **client_options)
        self.app_launch = AppLaunchClient(self.admin_store, self.navigator, **client_options)
        self.login_audit = LoginAuditClient(self.admin_store, self.navigator, **client_options)
        self.tracking_errors = TrackingErrorsClient(self.admin_store, self.navigator, **client_options)
        self.health = HealthClient(self.admin_store, self.navigator, **client_options)
        self.partners = PartnersClient(self.admin_store, self.navigator, **client_options)
        self.deals = DealsClient(self.admin_store, self.navigator, **client_options)
        self.sales = SalesClient(navigator=self.navigator, **client_options)
        self.influencer_manager = InfluencerManagerClient(self.manager_store, self.navigator, **client_options)
        self.influencer_portal = InfluencerPortalClient(self.portal_store, self.navigator, **client_options)
        self.partner_portal = PartnerPortalClient(self.partner_store, self.navigator, **client_options)

        # Contexts
        self.admin = AdminAuthContext(self.admin_store, self.accounts, audit=self.login_audit)
        self.manager = InfluencerManagerContext(self.manager_store, self.influencer_manager)
        self.portal = InfluencerPortalContext(self.portal_store, self.influencer_portal)
        self.partner = PartnerContext(self.partner_store, self.partner_portal)

        # Queries (with injected clients)
        self.influencer_queries = InfluencerQueries(self.query_client, self.influencers, self.influencer_manager)
        self.app_launch_queries = AppLaunchQueries(self.query_client, self.app_launch)
        self.login_audit_queries = LoginAuditQueries(self.query_client, self.login_audit)
        self.tracking_error_queries = TrackingErrorQueries(self.query_client, self.tracking_errors)
        self.health_queries = HealthQueries(self.query_client, self.health)
        self.sales_queries = SalesQueries(self.query_client, self.sales)
        self.portal_queries = InfluencerPortalQueries(self.query_client, self.influencer_portal)
        self.partner_portal_queries = PartnerPortalQueries(self.query_client, self.partner_portal)
        self.partner_queries = PartnerQueries(self.query_client, self.partners)
        self.deal_queries = DealQueries(self.query_client, self.deals)

    @property
    def clients(self) -> list[BaseClient]:
        return [
            self.accounts,
            self.influencers,
            self.app_launch,
            self.login_audit,
            self.tracking_errors,
            self.health,
            self.partners,
            self.deals,
            self.sales,
            self.influencer_manager,
            self.influencer_portal,
            self.partner_portal,
        ]

    async def open(self) -> None:
        """Open every HTTP client and resolve stored sessions."""
        for client in self.clients:
            await client.open()
        for context in (self.admin, self.manager, self.portal, self.partner):
            await context.resolve()
        logger.info("Container ready ({} clients)", len(self.clients))

    async def aclose(self) -> None:
        for client in self.clients:
            await client.aclose()
        if isinstance(self.storage, DuckDBStorage):
            self.storage.close()

    async def __aenter__(self) -> "Container":
        await self.open()
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()
