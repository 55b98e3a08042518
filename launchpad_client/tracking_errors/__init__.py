"""Tracking errors API client."""

from launchpad_client.tracking_errors.client import TrackingErrorsClient
from launchpad_client.tracking_errors.schemas import (
    ErrorSeverity,
    ReviewStatus,
    TrackingErrorFilters,
    TrackingErrorStats,
    TrackingErrorVideo,
)

__all__ = [
    "TrackingErrorsClient",
    "ErrorSeverity",
    "ReviewStatus",
    "TrackingErrorVideo",
    "TrackingErrorStats",
    "TrackingErrorFilters",
]
