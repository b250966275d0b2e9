"""Derived views returned by the services. Never persisted."""

from enum import Enum

from pydantic import BaseModel, Field

from planit.models.records import Activity, Category, Trip


class ActivityStatus(str, Enum):
    PROPOSED = "proposed"
    LOCKED_IN = "locked_in"


class VoteSummary(BaseModel):
    activity_id: str
    vote_count: int = Field(..., ge=0)
    votes_required: int = Field(..., ge=1)
    status: ActivityStatus
    has_voted: bool = False


class CategoryTotal(BaseModel):
    category: Category
    amount: float
    percent_of_total: float


class BudgetSummary(BaseModel):
    total_cost: float
    total_budget: float | None = None
    remaining: float | None = None
    used_percent: float | None = None
    over_budget: bool = False
    by_category: list[CategoryTotal]
    activities: list[Activity]


class JoinResult(BaseModel):
    trip: Trip
    already_joined: bool
