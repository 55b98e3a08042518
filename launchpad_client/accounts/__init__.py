"""Admin accounts API client."""

from launchpad_client.accounts.client import AccountsClient
from launchpad_client.accounts.schemas import (
    AccountResponse,
    LoginInput,
    LoginResponse,
    Organization,
    OrganizationMember,
    OrganizationRole,
)

__all__ = [
    "AccountsClient",
    "LoginInput",
    "LoginResponse",
    "AccountResponse",
    "Organization",
    "OrganizationMember",
    "OrganizationRole",
]
