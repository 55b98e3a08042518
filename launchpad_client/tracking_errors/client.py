"""Tracking errors API client - lab video review."""

from launchpad_client.base import BaseClient
from launchpad_client.domains import AuthDomain
from launchpad_client.tracking_errors.schemas import (
    ReviewStatus,
    TrackingErrorFilters,
    TrackingErrorStats,
    TrackingErrorVideo,
)


class TrackingErrorsClient(BaseClient):
    """Client for admin tracking error endpoints."""

    domain = AuthDomain.ADMIN

    async def get_tracking_errors(self, filters: TrackingErrorFilters | None = None) -> list[TrackingErrorVideo]:
        """GET /admin/tracking-errors - newest first, optionally filtered."""
        params = filters.model_dump(mode="json", exclude_none=True) if filters else None
        return await self._get("/tracking-errors", params)

    async def get_tracking_error(self, error_id: str) -> TrackingErrorVideo:
        """GET /admin/tracking-errors/{id}."""
        return await self._get(f"/tracking-errors/{error_id}")

    async def update_review_status(self, error_id: str, status: ReviewStatus, notes: str | None = None) -> None:
        """PATCH /admin/tracking-errors/{id} - notes are only sent when given."""
        update: dict[str, str] = {"review_status": str(status)}
        if notes is not None:
            update["reviewer_notes"] = notes
        await self._patch(f"/tracking-errors/{error_id}", update)

    async def get_stats(self) -> TrackingErrorStats:
        """GET /admin/tracking-errors/stats - dashboard counters."""
        return await self._get("/tracking-errors/stats")
