"""Admin accounts API client - login and current account."""

from launchpad_client.accounts.schemas import AccountResponse, LoginInput, LoginResponse
from launchpad_client.base import BaseClient
from launchpad_client.domains import AuthDomain


class AccountsClient(BaseClient):
    """Client for admin auth endpoints."""

    domain = AuthDomain.ADMIN

    async def login(self, data: LoginInput) -> LoginResponse:
        """POST /admin/auth/login - exchange credentials for a token."""
        return await self._post("/auth/login", data.model_dump(mode="json"))

    async def me(self) -> AccountResponse:
        """GET /admin/auth/me - current user, organization and membership."""
        return await self._get("/auth/me")

    async def switch_organization(self, organization_id: str) -> AccountResponse:
        """POST /admin/auth/organization - make an organization current."""
        return await self._post("/auth/organization", {"organization_id": organization_id})
