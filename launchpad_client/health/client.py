"""Database health API client."""

from launchpad_client.base import BaseClient
from launchpad_client.domains import AuthDomain
from launchpad_client.health.schemas import DatabaseHealth, IndexHealth, TableHealth


class HealthClient(BaseClient):
    """Client for admin database health endpoints."""

    domain = AuthDomain.ADMIN

    async def get_database_health(self) -> DatabaseHealth:
        """GET /admin/health/database - size, cache hit ratio, connections."""
        return await self._get("/health/database")

    async def get_table_health(self) -> list[TableHealth]:
        """GET /admin/health/database/tables - per-table bloat and scans."""
        return await self._get("/health/database/tables")

    async def get_index_health(self) -> list[IndexHealth]:
        """GET /admin/health/database/indexes - index size and usage."""
        return await self._get("/health/database/indexes")
