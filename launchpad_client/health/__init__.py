"""Database health API client."""

from launchpad_client.health.client import HealthClient
from launchpad_client.health.schemas import (
    DatabaseHealth,
    HealthStatus,
    IndexHealth,
    TableHealth,
    format_bytes,
    get_dead_tuple_status,
    get_health_status,
)

__all__ = [
    "HealthClient",
    "HealthStatus",
    "DatabaseHealth",
    "TableHealth",
    "IndexHealth",
    "get_health_status",
    "get_dead_tuple_status",
    "format_bytes",
]
