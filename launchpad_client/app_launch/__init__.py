"""App launch API client - projects, checklist, beta testers, releases."""

from launchpad_client.app_launch.client import AppLaunchClient
from launchpad_client.app_launch.schemas import (
    AppLaunchStats,
    AppProject,
    AppRelease,
    BetaTester,
    BetaTesterStatus,
    ChecklistCategory,
    ChecklistItem,
    CreateAppProjectInput,
    CreateReleaseInput,
    InviteTesterInput,
    Platform,
    ProjectStatus,
    ReleaseTrack,
    UpdateAppProjectInput,
)

__all__ = [
    "AppLaunchClient",
    # Enums
    "Platform",
    "ProjectStatus",
    "ChecklistCategory",
    "BetaTesterStatus",
    "ReleaseTrack",
    # Records
    "AppProject",
    "ChecklistItem",
    "BetaTester",
    "AppRelease",
    "AppLaunchStats",
    # Inputs
    "CreateAppProjectInput",
    "UpdateAppProjectInput",
    "InviteTesterInput",
    "CreateReleaseInput",
]
