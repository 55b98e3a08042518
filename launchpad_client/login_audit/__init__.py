"""Login audit API client."""

from launchpad_client.login_audit.client import LoginAuditClient
from launchpad_client.login_audit.schemas import (
    CreateLoginAuditInput,
    LoginAuditFilters,
    LoginAuditLog,
    LoginAuditStats,
    LoginAuditStatus,
)

__all__ = [
    "LoginAuditClient",
    "LoginAuditStatus",
    "LoginAuditLog",
    "LoginAuditStats",
    "LoginAuditFilters",
    "CreateLoginAuditInput",
]
