"""Database health schemas and status helpers."""

from decimal import ROUND_HALF_UP, Decimal
from enum import StrEnum
from typing import TypedDict


class HealthStatus(StrEnum):
    HEALTHY = "healthy"
    WARNING = "warning"
    CRITICAL = "critical"


class DatabaseHealth(TypedDict):
    db_size_mb: float
    cache_hit_ratio: float
    total_connections: int
    active_connections: int
    total_transactions: int
    stats_reset: str | None


class TableHealth(TypedDict):
    table_name: str
    schema_name: str
    row_count: int
    dead_tuples: int
    dead_ratio: float
    table_size_bytes: int
    table_size_display: str
    table_cache_hit_ratio: float
    last_vacuum: str | None
    last_analyze: str | None
    seq_scan: int
    idx_scan: int


class IndexHealth(TypedDict):
    index_name: str
    table_name: str
    index_size_bytes: int
    index_size_display: str
    idx_scan: int
    is_unused: bool


def get_health_status(cache_hit_ratio: float) -> HealthStatus:
    """Cache hit ratio (percent) to status."""
    if cache_hit_ratio >= 99:
        return HealthStatus.HEALTHY
    if cache_hit_ratio >= 95:
        return HealthStatus.WARNING
    return HealthStatus.CRITICAL


def get_dead_tuple_status(dead_ratio: float) -> HealthStatus:
    """Dead tuple ratio (percent) to status."""
    if dead_ratio < 5:
        return HealthStatus.HEALTHY
    if dead_ratio < 10:
        return HealthStatus.WARNING
    return HealthStatus.CRITICAL


_SIZES = ["B", "KB", "MB", "GB", "TB"]


def format_bytes(num_bytes: int) -> str:
    """Human readable size, 1024-based, one decimal at most."""
    if num_bytes <= 0:
        return "0 B"
    value = float(num_bytes)
    i = 0
    while value >= 1024 and i < len(_SIZES) - 1:
        value /= 1024
        i += 1
    # One decimal, halves up
    value = Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{float(value):g} {_SIZES[i]}"
