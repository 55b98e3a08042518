"""App launch queries - projects, checklist, beta testers, releases."""

from dataclasses import dataclass
from functools import partial

from app.query import AppLaunchKeys, MutationResult, QueryClient, QueryResult
from launchpad_client.app_launch import (
    AppLaunchClient,
    BetaTesterStatus,
    ChecklistCategory,
    ChecklistItem,
    CreateAppProjectInput,
    CreateReleaseInput,
    InviteTesterInput,
    UpdateAppProjectInput,
)


@dataclass
class CategoryProgress:
    category: ChecklistCategory
    total: int
    completed: int
    percentage: int


@dataclass
class ChecklistProgress:
    progress: list[CategoryProgress]
    total_progress: int


def _percent(completed: int, total: int) -> int:
    # Halves go up
    return int(completed * 100 / total + 0.5) if total else 0


def summarize_checklist(checklist: list[ChecklistItem] | None) -> ChecklistProgress:
    """Completion per category and overall."""
    if not checklist:
        return ChecklistProgress(progress=[], total_progress=0)

    progress = []
    for category in ChecklistCategory:
        items = [item for item in checklist if item["category"] == category]
        completed = sum(1 for item in items if item["is_completed"])
        progress.append(
            CategoryProgress(
                category=category,
                total=len(items),
                completed=completed,
                percentage=_percent(completed, len(items)),
            )
        )

    total_completed = sum(1 for item in checklist if item["is_completed"])
    return ChecklistProgress(progress=progress, total_progress=_percent(total_completed, len(checklist)))


class AppLaunchQueries:
    """Cached reads and invalidating writes for app launch resources."""

    def __init__(self, query_client: QueryClient, api: AppLaunchClient):
        self._qc = query_client
        self._api = api

    # ========== Projects ==========

    async def projects(self) -> QueryResult:
        return await self._qc.fetch(AppLaunchKeys.projects(), self._api.get_projects)

    async def project(self, project_id: str) -> QueryResult:
        return await self._qc.fetch(
            AppLaunchKeys.project(project_id),
            partial(self._api.get_project, project_id),
            enabled=bool(project_id),
        )

    async def create_project(self, data: CreateAppProjectInput) -> MutationResult:
        return await self._qc.mutate(self._api.create_project, data, invalidates=[AppLaunchKeys.ALL])

    async def update_project(self, project_id: str, data: UpdateAppProjectInput) -> MutationResult:
        return await self._qc.mutate(self._api.update_project, project_id, data, invalidates=[AppLaunchKeys.ALL])

    async def delete_project(self, project_id: str) -> MutationResult:
        return await self._qc.mutate(self._api.delete_project, project_id, invalidates=[AppLaunchKeys.ALL])

    # ========== Checklist ==========

    async def checklist(self, project_id: str) -> QueryResult:
        return await self._qc.fetch(
            AppLaunchKeys.checklist(project_id),
            partial(self._api.get_checklist, project_id),
            enabled=bool(project_id),
        )

    async def checklist_progress(self, project_id: str) -> ChecklistProgress:
        result = await self.checklist(project_id)
        return summarize_checklist(result.data)

    async def toggle_checklist_item(self, item_id: str, completed: bool) -> MutationResult:
        return await self._qc.mutate(self._api.toggle_checklist_item, item_id, completed, invalidates=[AppLaunchKeys.ALL])

    # ========== Beta testers ==========

    async def beta_testers(self, project_id: str) -> QueryResult:
        return await self._qc.fetch(
            AppLaunchKeys.beta_testers(project_id),
            partial(self._api.get_beta_testers, project_id),
            enabled=bool(project_id),
        )

    async def invite_testers(self, testers: list[InviteTesterInput]) -> MutationResult:
        return await self._qc.mutate(self._api.invite_testers, testers, invalidates=[AppLaunchKeys.ALL])

    async def update_tester_status(self, tester_id: str, status: BetaTesterStatus) -> MutationResult:
        return await self._qc.mutate(self._api.update_tester_status, tester_id, status, invalidates=[AppLaunchKeys.ALL])

    async def remove_tester(self, tester_id: str) -> MutationResult:
        return await self._qc.mutate(self._api.remove_tester, tester_id, invalidates=[AppLaunchKeys.ALL])

    # ========== Releases ==========

    async def releases(self, project_id: str) -> QueryResult:
        return await self._qc.fetch(
            AppLaunchKeys.releases(project_id),
            partial(self._api.get_releases, project_id),
            enabled=bool(project_id),
        )

    async def create_release(self, data: CreateReleaseInput) -> MutationResult:
        return await self._qc.mutate(self._api.create_release, data, invalidates=[AppLaunchKeys.ALL])

    # ========== Stats ==========

    async def stats(self) -> QueryResult:
        return await self._qc.fetch(AppLaunchKeys.stats(), self._api.get_stats)
