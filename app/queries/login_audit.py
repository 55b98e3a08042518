"""Login audit queries."""

from functools import partial

from app.query import LoginAuditKeys, MutationResult, QueryClient, QueryResult
from launchpad_client.login_audit import CreateLoginAuditInput, LoginAuditClient, LoginAuditFilters


class LoginAuditQueries:
    def __init__(self, query_client: QueryClient, api: LoginAuditClient):
        self._qc = query_client
        self._api = api

    async def logs(self, filters: LoginAuditFilters | None = None) -> QueryResult:
        return await self._qc.fetch(LoginAuditKeys.logs(filters), partial(self._api.get_logs, filters))

    async def stats(self, days: int = 30) -> QueryResult:
        return await self._qc.fetch(LoginAuditKeys.stats(days), partial(self._api.get_stats, days))

    async def log_login_attempt(self, data: CreateLoginAuditInput) -> MutationResult:
        return await self._qc.mutate(self._api.log_login_attempt, data, invalidates=[LoginAuditKeys.ALL])
