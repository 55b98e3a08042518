"""Sales CRM schemas - leads, notes, demo pricing."""

from enum import StrEnum
from typing import TypedDict

from pydantic import BaseModel


class DealStatus(StrEnum):
    """Lead pipeline stage."""

    NEW = "new"
    CONTACTED = "contacted"
    DEMO = "demo"
    NEGOTIATION = "negotiation"
    WON = "won"
    LOST = "lost"


class PainPoint(StrEnum):
    TIME_WASTE = "time_waste"
    NO_OVERVIEW = "no_overview"
    NUTRITION_CHAOS = "nutrition_chaos"
    SCALING = "scaling"
    NO_VBT = "no_vbt"
    RETENTION = "retention"
    BURNOUT = "burnout"
    DATA_SILOS = "data_silos"


class SalesNote(TypedDict):
    id: str
    lead_id: str
    content: str
    created_by: str
    created_at: str


class SalesLead(TypedDict, total=False):
    id: str
    gym_name: str
    contact_name: str
    contact_email: str
    contact_phone: str
    coaches_count: int
    clients_count: int
    pain_points: list[str]
    pricing_quoted: float
    founding_partner: bool
    status: str
    assigned_to: str
    demo_date: str
    closed_date: str
    notes: list[SalesNote]
    created_at: str
    updated_at: str


class PipelineStats(TypedDict):
    total_leads: int
    by_status: dict[str, int]
    total_pipeline_value: float
    won_value: float
    founding_partners: int


class CreateLeadInput(BaseModel):
    gym_name: str
    contact_name: str
    contact_email: str
    contact_phone: str | None = None
    coaches_count: int
    clients_count: int
    pain_points: list[PainPoint] = []
    pricing_quoted: float
    founding_partner: bool = False
    notes: str | None = None


class UpdateLeadInput(BaseModel):
    gym_name: str | None = None
    contact_name: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    coaches_count: int | None = None
    clients_count: int | None = None
    pain_points: list[PainPoint] | None = None
    pricing_quoted: float | None = None
    founding_partner: bool | None = None
    status: DealStatus | None = None
    assigned_to: str | None = None


# Demo wizard pricing, CHF per month
GYM_BASE = 150
COACH_RATE = 25
CLIENT_RATE = 5
FOUNDING_DISCOUNT = 0.5
YEARLY_DISCOUNT = 0.15


def calculate_pricing(coaches_count: int, clients_count: int, founding_partner: bool) -> dict[str, float]:
    """Monthly and yearly quote for a gym."""
    total = GYM_BASE + coaches_count * COACH_RATE + clients_count * CLIENT_RATE
    discount = FOUNDING_DISCOUNT if founding_partner else 0
    monthly = total * (1 - discount)
    yearly = monthly * 12 * (1 - YEARLY_DISCOUNT)
    return {"monthly": monthly, "yearly": yearly}
