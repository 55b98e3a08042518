"""Sales API client - CRM leads and notes.

Requests authenticate with the shared sales password (see
``SharedPasswordAuth``), not a per-user token.
"""

from launchpad_client.base import BaseClient
from launchpad_client.domains import AuthDomain
from launchpad_client.sales.schemas import (
    CreateLeadInput,
    DealStatus,
    PipelineStats,
    SalesLead,
    UpdateLeadInput,
)


class SalesClient(BaseClient):
    """Client for sales endpoints."""

    domain = AuthDomain.SALES

    # ========== Leads ==========

    async def get_leads(self, status: DealStatus | None = None, assigned_to: str | None = None) -> list[SalesLead]:
        """GET /sales/leads - optionally by status or owner."""
        return await self._get("/leads", {"status": status and str(status), "assigned_to": assigned_to})

    async def get_lead(self, lead_id: str) -> SalesLead:
        """GET /sales/leads/{id}."""
        return await self._get(f"/leads/{lead_id}")

    async def create_lead(self, data: CreateLeadInput) -> dict:
        """POST /sales/leads - returns {success, id, lead}."""
        return await self._post("/leads", data.model_dump(mode="json", exclude_none=True))

    async def update_lead(self, lead_id: str, data: UpdateLeadInput) -> dict:
        """PUT /sales/leads/{id} - returns {success, lead}."""
        return await self._put(f"/leads/{lead_id}", data.model_dump(mode="json", exclude_none=True))

    async def delete_lead(self, lead_id: str) -> dict:
        """DELETE /sales/leads/{id}."""
        return await self._delete(f"/leads/{lead_id}")

    # ========== Notes ==========

    async def add_note(self, lead_id: str, content: str) -> dict:
        """POST /sales/leads/{id}/notes - returns {success, note}."""
        return await self._post(f"/leads/{lead_id}/notes", {"content": content})

    async def delete_note(self, note_id: str) -> dict:
        """DELETE /sales/notes/{id}."""
        return await self._delete(f"/notes/{note_id}")

    # ========== Pipeline ==========

    async def get_pipeline_stats(self) -> PipelineStats:
        """GET /sales/pipeline-stats."""
        return await self._get("/pipeline-stats")

