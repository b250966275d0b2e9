"""Timeline projection: activities grouped by day, ordered by time of day."""

import datetime as dt
from collections.abc import Iterable

from planit.models import Activity


def chronological(activities: Iterable[Activity]) -> list[Activity]:
    return sorted(activities, key=lambda a: (a.date, a.time))


def group_by_date(activities: Iterable[Activity]) -> dict[dt.date, list[Activity]]:
    """Map each date to its activities. Keys ascend; each group ascends by time.

    Activities sharing a date and time keep their input order.
    """
    grouped: dict[dt.date, list[Activity]] = {}
    for activity in chronological(activities):
        grouped.setdefault(activity.date, []).append(activity)
    return grouped
