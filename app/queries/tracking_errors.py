"""Tracking error queries - lab video review."""

from functools import partial

from app.query import MutationResult, QueryClient, QueryResult, TrackingErrorKeys
from launchpad_client.tracking_errors import ReviewStatus, TrackingErrorFilters, TrackingErrorsClient


class TrackingErrorQueries:
    def __init__(self, query_client: QueryClient, api: TrackingErrorsClient):
        self._qc = query_client
        self._api = api

    async def tracking_errors(self, filters: TrackingErrorFilters | None = None) -> QueryResult:
        return await self._qc.fetch(TrackingErrorKeys.list(filters), partial(self._api.get_tracking_errors, filters))

    async def tracking_error(self, error_id: str) -> QueryResult:
        return await self._qc.fetch(
            TrackingErrorKeys.detail(error_id),
            partial(self._api.get_tracking_error, error_id),
            enabled=bool(error_id),
        )

    async def stats(self) -> QueryResult:
        return await self._qc.fetch(TrackingErrorKeys.stats(), self._api.get_stats)

    async def update_review_status(self, error_id: str, status: ReviewStatus, notes: str | None = None) -> MutationResult:
        return await self._qc.mutate(
            self._api.update_review_status,
            error_id,
            status,
            notes,
            invalidates=[TrackingErrorKeys.ALL],
        )
