"""Sales CRM queries."""

from functools import partial

from app.query import MutationResult, QueryClient, QueryResult, SalesKeys
from launchpad_client.sales import CreateLeadInput, DealStatus, SalesClient, UpdateLeadInput


class SalesQueries:
    def __init__(self, query_client: QueryClient, api: SalesClient):
        self._qc = query_client
        self._api = api

    async def leads(self, status: DealStatus | None = None, assigned_to: str | None = None) -> QueryResult:
        return await self._qc.fetch(SalesKeys.leads(status, assigned_to), partial(self._api.get_leads, status, assigned_to))

    async def lead(self, lead_id: str) -> QueryResult:
        return await self._qc.fetch(SalesKeys.lead(lead_id), partial(self._api.get_lead, lead_id), enabled=bool(lead_id))

    async def pipeline_stats(self) -> QueryResult:
        return await self._qc.fetch(SalesKeys.pipeline_stats(), self._api.get_pipeline_stats)

    async def create_lead(self, data: CreateLeadInput) -> MutationResult:
        return await self._qc.mutate(self._api.create_lead, data, invalidates=[SalesKeys.ALL])

    async def update_lead(self, lead_id: str, data: UpdateLeadInput) -> MutationResult:
        return await self._qc.mutate(self._api.update_lead, lead_id, data, invalidates=[SalesKeys.ALL])

    async def delete_lead(self, lead_id: str) -> MutationResult:
        return await self._qc.mutate(self._api.delete_lead, lead_id, invalidates=[SalesKeys.ALL])

    async def add_note(self, lead_id: str, content: str) -> MutationResult:
        return await self._qc.mutate(self._api.add_note, lead_id, content, invalidates=[SalesKeys.ALL])

    async def delete_note(self, note_id: str) -> MutationResult:
        return await self._qc.mutate(self._api.delete_note, note_id, invalidates=[SalesKeys.ALL])
