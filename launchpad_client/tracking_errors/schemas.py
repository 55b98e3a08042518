"""Tracking error video schemas."""

from enum import StrEnum
from typing import TypedDict

from pydantic import BaseModel


class ErrorSeverity(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ReviewStatus(StrEnum):
    """Manual review outcome."""

    PENDING = "pending"
    REVIEWED = "reviewed"
    USEFUL = "useful"
    NOT_USEFUL = "not_useful"
    ARCHIVED = "archived"


class TrackingErrorVideo(TypedDict, total=False):
    """Recorded session where bar tracking failed. JSONB timelines kept as-is."""

    id: str
    created_at: str
    user_id: str
    session_id: str | None
    storage_path: str
    video_url: str | None
    exercise_name: str | None
    weight_kg: float | None
    device_model: str | None
    android_version: str | None
    error_severity: str
    error_types: list[str]
    confidence_timeline: list[dict]
    lock_events: list[dict]
    tracking_jumps: list[dict]
    total_frames: int
    frames_locked: int
    frames_unlocked: int
    lock_loss_count: int
    avg_confidence: float | None
    review_status: str
    reviewer_notes: str | None


class SeverityCounts(TypedDict):
    low: int
    medium: int
    high: int
    critical: int


class TrackingErrorStats(TypedDict):
    total: int
    pending_review: int
    high_critical_count: int
    avg_lock_ratio: float | None
    by_severity: SeverityCounts


class TrackingErrorFilters(BaseModel):
    """List filters. Name filters are substring matches; dates are ISO strings."""

    severity: ErrorSeverity | None = None
    exercise_name: str | None = None
    device_model: str | None = None
    review_status: ReviewStatus | None = None
    start_date: str | None = None
    end_date: str | None = None
