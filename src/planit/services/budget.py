"""Budget aggregation over a trip's activities.

Every proposed activity counts toward the estimate, locked in or not.
Nothing here is cached; call again whenever the activity set changes.
"""

from collections.abc import Iterable

from planit.models import Activity, BudgetSummary, Category, CategoryTotal
from planit.services.timeline import chronological


def total_cost(activities: Iterable[Activity]) -> float:
    return sum((activity.estimated_cost for activity in activities), 0.0)


def remaining(total_budget: float, spent: float) -> float:
    """Negative when over budget."""
    return total_budget - spent


def used_percent(total_budget: float | None, spent: float) -> float | None:
    if total_budget is None or total_budget <= 0:
        return None
    return 100 * spent / total_budget


def by_category(activities: Iterable[Activity]) -> list[CategoryTotal]:
    """Per-category totals, most expensive first."""
    sums: dict[Category, float] = {}
    for activity in activities:
        sums[activity.category] = sums.get(activity.category, 0.0) + activity.estimated_cost

    overall = sum(sums.values(), 0.0)
    totals = [
        CategoryTotal(
            category=category,
            amount=amount,
            percent_of_total=100 * amount / overall if overall > 0 else 0.0,
        )
        for category, amount in sums.items()
    ]
    return sorted(totals, key=lambda t: t.amount, reverse=True)


def summarize_budget(activities: Iterable[Activity], total_budget: float | None = None) -> BudgetSummary:
    activities = list(activities)
    spent = total_cost(activities)
    left = remaining(total_budget, spent) if total_budget is not None else None

    return BudgetSummary(
        total_cost=spent,
        total_budget=total_budget,
        remaining=left,
        used_percent=used_percent(total_budget, spent),
        over_budget=left is not None and left < 0,
        by_category=by_category(activities),
        activities=chronological(activities),
    )
