"""Admin account schemas - login, organization membership."""

from enum import StrEnum
from typing import TypedDict

from pydantic import BaseModel


class OrganizationRole(StrEnum):
    """Role within an organization."""

    OWNER = "owner"
    ADMIN = "admin"
    MEMBER = "member"
    VIEWER = "viewer"


class SubscriptionPlan(StrEnum):
    STARTER = "starter"
    PROFESSIONAL = "professional"
    ENTERPRISE = "enterprise"


class LoginInput(BaseModel):
    """Credentials for password login."""

    email: str
    password: str


class UserRecord(TypedDict, total=False):
    id: str
    email: str
    role: str
    name: str | None


class LoginResponse(TypedDict):
    token: str
    user: UserRecord


class Organization(TypedDict, total=False):
    id: str
    name: str
    slug: str
    subscription_status: str
    subscription_plan: str
    trial_ends_at: str | None
    max_seats: int
    max_creators: int
    created_at: str


class OrganizationMember(TypedDict, total=False):
    id: str
    organization_id: str
    user_id: str
    role: str
    permissions: list[str]
    created_at: str


class AccountResponse(TypedDict, total=False):
    """GET /auth/me - current user with active organization."""

    user: UserRecord
    organization: Organization | None
    membership: OrganizationMember | None
    organizations: list[Organization]
