"""Query key namespaces, one per resource.

Every key starts with its resource's ``ALL`` prefix, so invalidating
``ALL`` refreshes every read of that resource.
"""

from typing import Any

from app.query.cache import QueryKey, make_key


class InfluencerKeys:
    ALL: QueryKey = ("influencers",)

    @staticmethod
    def list(status: Any = None, contact_person: str | None = None) -> QueryKey:
        return make_key(*InfluencerKeys.ALL, "list", {"status": status, "contact_person": contact_person})

    @staticmethod
    def detail(influencer_id: str) -> QueryKey:
        return make_key(*InfluencerKeys.ALL, "detail", influencer_id)

    @staticmethod
    def manager_list(status: Any = None) -> QueryKey:
        return make_key(*InfluencerKeys.ALL, "manager", status)


class AppLaunchKeys:
    ALL: QueryKey = ("appLaunch",)

    @staticmethod
    def projects() -> QueryKey:
        return (*AppLaunchKeys.ALL, "projects")

    @staticmethod
    def project(project_id: str) -> QueryKey:
        return (*AppLaunchKeys.ALL, "project", project_id)

    @staticmethod
    def checklist(project_id: str) -> QueryKey:
        return (*AppLaunchKeys.ALL, "checklist", project_id)

    @staticmethod
    def beta_testers(project_id: str) -> QueryKey:
        return (*AppLaunchKeys.ALL, "betaTesters", project_id)

    @staticmethod
    def releases(project_id: str) -> QueryKey:
        return (*AppLaunchKeys.ALL, "releases", project_id)

    @staticmethod
    def stats() -> QueryKey:
        return (*AppLaunchKeys.ALL, "stats")


class LoginAuditKeys:
    ALL: QueryKey = ("loginAudit",)

    @staticmethod
    def logs(filters: Any = None) -> QueryKey:
        return make_key(*LoginAuditKeys.ALL, "logs", filters)

    @staticmethod
    def stats(days: int | None = None) -> QueryKey:
        return (*LoginAuditKeys.ALL, "stats", days)


class TrackingErrorKeys:
    ALL: QueryKey = ("trackingErrors",)

    @staticmethod
    def list(filters: Any = None) -> QueryKey:
        return make_key(*TrackingErrorKeys.ALL, "list", filters)

    @staticmethod
    def detail(error_id: str) -> QueryKey:
        return (*TrackingErrorKeys.ALL, "detail", error_id)

    @staticmethod
    def stats() -> QueryKey:
        return (*TrackingErrorKeys.ALL, "stats")


class HealthKeys:
    ALL: QueryKey = ("health",)

    @staticmethod
    def database() -> QueryKey:
        return (*HealthKeys.ALL, "db")

    @staticmethod
    def tables() -> QueryKey:
        return (*HealthKeys.ALL, "tables")

    @staticmethod
    def indexes() -> QueryKey:
        return (*HealthKeys.ALL, "indexes")


class SalesKeys:
    ALL: QueryKey = ("sales",)

    @staticmethod
    def leads(status: Any = None, assigned_to: str | None = None) -> QueryKey:
        return make_key(*SalesKeys.ALL, "leads", {"status": status, "assigned_to": assigned_to})

    @staticmethod
    def lead(lead_id: str) -> QueryKey:
        return (*SalesKeys.ALL, "lead", lead_id)

    @staticmethod
    def pipeline_stats() -> QueryKey:
        return (*SalesKeys.ALL, "pipelineStats")


class InfluencerPortalKeys:
    ALL: QueryKey = ("influencerPortal",)

    @staticmethod
    def profile() -> QueryKey:
        return (*InfluencerPortalKeys.ALL, "profile")

    @staticmethod
    def stats() -> QueryKey:
        return (*InfluencerPortalKeys.ALL, "stats")

    @staticmethod
    def earnings_chart(months: int | None = None) -> QueryKey:
        return (*InfluencerPortalKeys.ALL, "earningsChart", months)

    @staticmethod
    def campaigns(status: str | None = None) -> QueryKey:
        return (*InfluencerPortalKeys.ALL, "campaigns", status)

    @staticmethod
    def campaign(campaign_id: str) -> QueryKey:
        return (*InfluencerPortalKeys.ALL, "campaign", campaign_id)

    @staticmethod
    def earnings(status: str | None = None) -> QueryKey:
        return (*InfluencerPortalKeys.ALL, "earnings", status)

    @staticmethod
    def payouts() -> QueryKey:
        return (*InfluencerPortalKeys.ALL, "payouts")


class PartnerPortalKeys:
    ALL: QueryKey = ("partnerPortal",)

    @staticmethod
    def profile() -> QueryKey:
        return (*PartnerPortalKeys.ALL, "profile")

    @staticmethod
    def stats() -> QueryKey:
        return (*PartnerPortalKeys.ALL, "stats")

    @staticmethod
    def earnings_chart(months: int | None = None) -> QueryKey:
        return (*PartnerPortalKeys.ALL, "earningsChart", months)

    @staticmethod
    def referral_links() -> QueryKey:
        return (*PartnerPortalKeys.ALL, "referralLinks")

    @staticmethod
    def referrals(status: str | None = None) -> QueryKey:
        return (*PartnerPortalKeys.ALL, "referrals", status)

    @staticmethod
    def payouts() -> QueryKey:
        return (*PartnerPortalKeys.ALL, "payouts")

    @staticmethod
    def payout_eligibility() -> QueryKey:
        return (*PartnerPortalKeys.ALL, "payoutEligibility")


class PartnerKeys:
    ALL: QueryKey = ("partners",)

    @staticmethod
    def list(filters: Any = None) -> QueryKey:
        return make_key(*PartnerKeys.ALL, "list", filters)

    @staticmethod
    def pending_approvals() -> QueryKey:
        return (*PartnerKeys.ALL, "pendingApprovals")

    @staticmethod
    def referrals(partner_id: str | None = None) -> QueryKey:
        return (*PartnerKeys.ALL, "referrals", partner_id)

    @staticmethod
    def pending_payouts() -> QueryKey:
        return (*PartnerKeys.ALL, "pendingPayouts")


class DealKeys:
    ALL: QueryKey = ("deals",)

    @staticmethod
    def list() -> QueryKey:
        return DealKeys.ALL

    @staticmethod
    def detail(deal_id: str) -> QueryKey:
        return (*DealKeys.ALL, "detail", deal_id)

    @staticmethod
    def creator(creator_id: str) -> QueryKey:
        return (*DealKeys.ALL, "creator", creator_id)

    @staticmethod
    def stats(creator_id: str | None = None) -> QueryKey:
        if creator_id is None:
            return (*DealKeys.ALL, "stats")
        return (*DealKeys.ALL, "stats", creator_id)
