"""App launch schemas - projects, checklist, beta testers, releases."""

from datetime import date
from enum import StrEnum
from typing import TypedDict

from pydantic import BaseModel, Field


class Platform(StrEnum):
    ANDROID = "android"
    IOS = "ios"


class ProjectStatus(StrEnum):
    """Project lifecycle stage."""

    SETUP = "setup"
    PREPARING = "preparing"
    BETA = "beta"
    REVIEW = "review"
    APPROVED = "approved"
    LIVE = "live"
    UPDATING = "updating"


class ChecklistCategory(StrEnum):
    SETUP = "setup"
    STORE_LISTING = "store_listing"
    ASSETS = "assets"
    COMPLIANCE = "compliance"
    BETA = "beta"
    RELEASE = "release"


class BetaTesterStatus(StrEnum):
    INVITED = "invited"
    ACTIVE = "active"
    INACTIVE = "inactive"
    REMOVED = "removed"


class ReleaseTrack(StrEnum):
    INTERNAL = "internal"
    ALPHA = "alpha"
    CLOSED_BETA = "closed_beta"
    OPEN_BETA = "open_beta"
    PRODUCTION = "production"


class AppProject(TypedDict):
    id: str
    organization_id: str
    name: str
    description: str | None
    package_name: str | None
    bundle_id: str | None
    platforms: list[str]
    status: str
    completion_percentage: int
    target_launch_date: str | None
    launched_at: str | None
    google_play_url: str | None
    app_store_url: str | None
    app_category: str | None
    content_rating: str | None
    icon_url: str | None
    created_at: str
    updated_at: str
    created_by: str | None


class ChecklistItem(TypedDict):
    id: str
    project_id: str
    category: str
    item_key: str
    sort_order: int
    title: str
    description: str | None
    help_text: str | None
    is_required: bool
    is_completed: bool
    is_blocked: bool
    blocked_reason: str | None
    completed_at: str | None
    completed_by: str | None
    platform: str | None
    created_at: str


class BetaTester(TypedDict):
    id: str
    project_id: str
    organization_id: str
    email: str
    name: str | None
    platform: str
    group_name: str
    status: str
    installed_at: str | None
    last_active_at: str | None
    feedback_count: int
    crash_count: int
    invite_token: str | None
    invited_at: str
    invite_expires_at: str | None
    created_at: str


class AppRelease(TypedDict, total=False):
    id: str
    project_id: str
    platform: str
    version_name: str
    version_code: int | None
    track: str
    rollout_percentage: int
    status: str
    submitted_at: str | None
    rejection_reason: str | None
    released_at: str | None
    changelog: dict[str, str]
    created_at: str
    updated_at: str


class AppLaunchStats(TypedDict):
    total_projects: int
    projects_by_status: dict[str, int]
    active_beta_testers: int
    pending_reviews: int
    live_apps: int


class CreateAppProjectInput(BaseModel):
    name: str
    description: str | None = None
    platforms: list[Platform]
    package_name: str | None = None
    bundle_id: str | None = None
    target_launch_date: date | None = None
    app_category: str | None = None


class UpdateAppProjectInput(BaseModel):
    name: str | None = None
    description: str | None = None
    package_name: str | None = None
    bundle_id: str | None = None
    status: ProjectStatus | None = None
    target_launch_date: date | None = None
    app_category: str | None = None
    content_rating: str | None = None
    icon_url: str | None = None
    google_play_url: str | None = None
    app_store_url: str | None = None


class InviteTesterInput(BaseModel):
    project_id: str
    email: str
    name: str | None = None
    platform: str = Field(default="both", pattern="^(android|ios|both)$")
    group_name: str | None = None


class CreateReleaseInput(BaseModel):
    project_id: str
    platform: Platform
    version_name: str
    version_code: int | None = None
    track: ReleaseTrack | None = None
    changelog: dict[str, str] | None = None
