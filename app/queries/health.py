"""Database health queries.

Health numbers move constantly, so these use short stale times instead of
the cache default.
"""

from app.query import HealthKeys, QueryClient, QueryResult
from launchpad_client.health import HealthClient

DATABASE_STALE_TIME = 30.0
TABLES_STALE_TIME = 60.0


class HealthQueries:
    def __init__(self, query_client: QueryClient, api: HealthClient):
        self._qc = query_client
        self._api = api

    async def database(self) -> QueryResult:
        return await self._qc.fetch(HealthKeys.database(), self._api.get_database_health, stale_time=DATABASE_STALE_TIME)

    async def tables(self) -> QueryResult:
        return await self._qc.fetch(HealthKeys.tables(), self._api.get_table_health, stale_time=TABLES_STALE_TIME)

    async def indexes(self) -> QueryResult:
        return await self._qc.fetch(HealthKeys.indexes(), self._api.get_index_health, stale_time=TABLES_STALE_TIME)
