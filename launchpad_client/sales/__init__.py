"""Sales API client - CRM leads, notes, demo pricing."""

from launchpad_client.sales.client import SalesClient
from launchpad_client.sales.schemas import (
    CreateLeadInput,
    DealStatus,
    PainPoint,
    PipelineStats,
    SalesLead,
    SalesNote,
    UpdateLeadInput,
    calculate_pricing,
)

__all__ = [
    "SalesClient",
    "DealStatus",
    "PainPoint",
    "SalesLead",
    "SalesNote",
    "PipelineStats",
    "CreateLeadInput",
    "UpdateLeadInput",
    "calculate_pricing",
]
