"""Organization roles and the app areas they may open."""

from launchpad_client.accounts import OrganizationRole

ROLE_PERMISSIONS: dict[OrganizationRole, list[str]] = {
    OrganizationRole.OWNER: [
        "dashboard",
        "costs",
        "costs:fixed",
        "costs:services",
        "costs:users",
        "revenue",
        "analytics",
        "analytics:break-even",
        "analytics:trends",
        "creators",
        "creators:payouts",
        "creators:create",
        "creators:contracts",
        "creators:deals",
        "employees",
        "performance",
        "users",
        "sales",
        "sales:demo",
        "sales:crm",
        "tasks",
        "tasks:projects",
        "storage",
        "lab",
        "settings",
        "settings:team",
        "settings:billing",
        "settings:permissions",
    ],
    OrganizationRole.ADMIN: [
        "dashboard",
        "costs",
        "costs:fixed",
        "costs:services",
        "costs:users",
        "revenue",
        "analytics",
        "analytics:break-even",
        "analytics:trends",
        "creators",
        "creators:payouts",
        "creators:create",
        "creators:contracts",
        "creators:deals",
        "users",
        "sales",
        "sales:demo",
        "sales:crm",
        "tasks",
        "tasks:projects",
        "storage",
        "lab",
        "settings",
        "settings:team",
    ],
    OrganizationRole.MEMBER: [
        "dashboard",
        "creators",
        "creators:payouts",
        "creators:contracts",
        "creators:deals",
        "sales",
        "sales:crm",
        "tasks",
        "tasks:projects",
        "storage",
    ],
    OrganizationRole.VIEWER: [
        "dashboard",
        "creators",
        "tasks",
    ],
}

# Compensation and billing data
ROLE_SENSITIVE_PERMISSIONS: dict[OrganizationRole, list[str]] = {
    OrganizationRole.OWNER: ["compensation:view", "compensation:edit", "billing:view", "billing:manage"],
    OrganizationRole.ADMIN: ["compensation:view", "billing:view"],
    OrganizationRole.MEMBER: [],
    OrganizationRole.VIEWER: [],
}

# What a signed-in org member actually gets; viewers see only the dashboard
ORG_ROLE_PERMISSIONS: dict[OrganizationRole, list[str]] = {
    OrganizationRole.OWNER: ROLE_PERMISSIONS[OrganizationRole.OWNER],
    OrganizationRole.ADMIN: ROLE_PERMISSIONS[OrganizationRole.ADMIN],
    OrganizationRole.MEMBER: ROLE_PERMISSIONS[OrganizationRole.MEMBER],
    OrganizationRole.VIEWER: ["dashboard"],
}


def permissions_for(role: OrganizationRole | str | None) -> list[str]:
    if role is None:
        return []
    try:
        return list(ORG_ROLE_PERMISSIONS[OrganizationRole(role)])
    except ValueError:
        return []


def sensitive_permissions_for(role: OrganizationRole | str | None) -> list[str]:
    if role is None:
        return []
    try:
        return list(ROLE_SENSITIVE_PERMISSIONS[OrganizationRole(role)])
    except ValueError:
        return []


def has_permission(permissions: list[str], required: str, is_owner: bool) -> bool:
    """Owners pass; otherwise an exact grant or a grant of the parent area.

    ``"costs"`` grants ``"costs:fixed"``, not the other way round.
    """
    if is_owner:
        return True
    if required in permissions:
        return True
    parent = required.split(":")[0]
    return parent != required and parent in permissions


def has_sensitive_permission(permissions: list[str], required: str, is_owner: bool) -> bool:
    """Sensitive permissions need an exact grant; no parent fallback."""
    return is_owner or required in permissions
