"""Login audit schemas."""

from enum import StrEnum
from typing import TypedDict

from pydantic import BaseModel


class LoginAuditStatus(StrEnum):
    """Outcome of a login attempt."""

    SUCCESS = "success"
    FAILED_NOT_FOUND = "failed_not_found"
    FAILED_WRONG_PASSWORD = "failed_wrong_password"


class LoginAuditLog(TypedDict):
    id: str
    email: str
    account_name: str | None
    status: str
    ip_address: str | None
    user_agent: str | None
    attempted_at: str


class LoginAuditStats(TypedDict):
    total: int
    successful: int
    failed: int
    last24h: int
    failedLast24h: int
    uniqueEmails: int


class LoginAuditFilters(BaseModel):
    """List filters. `email` is a substring match, `days` a lookback window."""

    status: LoginAuditStatus | None = None
    email: str | None = None
    days: int | None = None
    limit: int | None = None


class CreateLoginAuditInput(BaseModel):
    email: str
    account_name: str | None = None
    status: LoginAuditStatus
    ip_address: str | None = None
    user_agent: str | None = None
