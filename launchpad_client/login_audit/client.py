"""Login audit API client."""

from launchpad_client.base import BaseClient
from launchpad_client.domains import AuthDomain
from launchpad_client.login_audit.schemas import (
    CreateLoginAuditInput,
    LoginAuditFilters,
    LoginAuditLog,
    LoginAuditStats,
)


class LoginAuditClient(BaseClient):
    """Client for admin login audit endpoints."""

    domain = AuthDomain.ADMIN

    async def log_login_attempt(self, data: CreateLoginAuditInput) -> LoginAuditLog:
        """POST /admin/login-audit - record a login attempt."""
        return await self._post("/login-audit", data.model_dump(mode="json", exclude_none=True))

    async def get_logs(self, filters: LoginAuditFilters | None = None) -> list[LoginAuditLog]:
        """GET /admin/login-audit - newest first, optionally filtered."""
        params = filters.model_dump(mode="json", exclude_none=True) if filters else None
        return await self._get("/login-audit", params)

    async def get_stats(self, days: int = 30) -> LoginAuditStats:
        """GET /admin/login-audit/stats?days= - counters over a window."""
        return await self._get("/login-audit/stats", {"days": days})
