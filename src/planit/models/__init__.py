"""
Pydantic models for Planit.
"""

from planit.models.records import Activity, Category, PlanitRecord, Trip, User
from planit.models.views import ActivityStatus, BudgetSummary, CategoryTotal, JoinResult, VoteSummary

__all__ = [
    "Activity",
    "ActivityStatus",
    "BudgetSummary",
    "Category",
    "CategoryTotal",
    "JoinResult",
    "PlanitRecord",
    "Trip",
    "User",
    "VoteSummary",
]
