"""App launch API client - projects, checklist, beta testers, releases."""

from launchpad_client.app_launch.schemas import (
    AppLaunchStats,
    AppProject,
    AppRelease,
    BetaTester,
    BetaTesterStatus,
    ChecklistItem,
    CreateAppProjectInput,
    CreateReleaseInput,
    InviteTesterInput,
    UpdateAppProjectInput,
)
from launchpad_client.base import BaseClient
from launchpad_client.domains import AuthDomain


class AppLaunchClient(BaseClient):
    """Client for admin app launch endpoints."""

    domain = AuthDomain.ADMIN

    # ========== Projects ==========

    async def get_projects(self) -> list[AppProject]:
        """GET /admin/app-launch/projects - newest first."""
        return await self._get("/app-launch/projects")

    async def get_project(self, project_id: str) -> AppProject:
        """GET /admin/app-launch/projects/{id}."""
        return await self._get(f"/app-launch/projects/{project_id}")

    async def create_project(self, data: CreateAppProjectInput) -> AppProject:
        """POST /admin/app-launch/projects - backend seeds the default checklist."""
        return await self._post("/app-launch/projects", data.model_dump(mode="json", exclude_none=True))

    async def update_project(self, project_id: str, data: UpdateAppProjectInput) -> AppProject:
        """PATCH /admin/app-launch/projects/{id}."""
        return await self._patch(f"/app-launch/projects/{project_id}", data.model_dump(mode="json", exclude_none=True))

    async def delete_project(self, project_id: str) -> None:
        """DELETE /admin/app-launch/projects/{id}."""
        await self._delete(f"/app-launch/projects/{project_id}")

    # ========== Checklist ==========

    async def get_checklist(self, project_id: str) -> list[ChecklistItem]:
        """GET /admin/app-launch/projects/{id}/checklist - ordered by category, sort order."""
        return await self._get(f"/app-launch/projects/{project_id}/checklist")

    async def toggle_checklist_item(self, item_id: str, completed: bool) -> ChecklistItem:
        """PATCH /admin/app-launch/checklist/{item_id} - mark done or undone."""
        return await self._patch(f"/app-launch/checklist/{item_id}", {"is_completed": completed})

    # ========== Beta testers ==========

    async def get_beta_testers(self, project_id: str) -> list[BetaTester]:
        """GET /admin/app-launch/projects/{id}/beta-testers."""
        return await self._get(f"/app-launch/projects/{project_id}/beta-testers")

    async def invite_testers(self, testers: list[InviteTesterInput]) -> list[BetaTester]:
        """POST /admin/app-launch/beta-testers - invite a batch."""
        return await self._post("/app-launch/beta-testers", [t.model_dump(mode="json", exclude_none=True) for t in testers])

    async def update_tester_status(self, tester_id: str, status: BetaTesterStatus) -> BetaTester:
        """PATCH /admin/app-launch/beta-testers/{id}."""
        return await self._patch(f"/app-launch/beta-testers/{tester_id}", {"status": str(status)})

    async def remove_tester(self, tester_id: str) -> None:
        """DELETE /admin/app-launch/beta-testers/{id}."""
        await self._delete(f"/app-launch/beta-testers/{tester_id}")

    # ========== Releases ==========

    async def get_releases(self, project_id: str) -> list[AppRelease]:
        """GET /admin/app-launch/projects/{id}/releases - newest first."""
        return await self._get(f"/app-launch/projects/{project_id}/releases")

    async def create_release(self, data: CreateReleaseInput) -> AppRelease:
        """POST /admin/app-launch/releases."""
        return await self._post("/app-launch/releases", data.model_dump(mode="json", exclude_none=True))

    # ========== Stats ==========

    async def get_stats(self) -> AppLaunchStats:
        """GET /admin/app-launch/stats - dashboard counters."""
        return await self._get("/app-launch/stats")
