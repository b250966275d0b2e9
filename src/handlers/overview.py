"""Read-only trip views: budget overview and day-by-day timeline."""

from typing import Any

from handlers.common import api_handler, current_user_id, json_response, path_param
from planit.db import get_record_store
from planit.services.activities import list_activities
from planit.services.budget import summarize_budget
from planit.services.quorum import vote_summary
from planit.services.timeline import group_by_date
from planit.services.trips import get_trip


@api_handler
def budget_handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    store = get_record_store()
    trip = get_trip(store, path_param(event, "tripId"))
    summary = summarize_budget(list_activities(store, trip), trip.budget)
    return json_response(200, summary.model_dump(mode="json", by_alias=True))


@api_handler
def timeline_handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    store = get_record_store()
    user_id = current_user_id(event)
    trip = get_trip(store, path_param(event, "tripId"))

    days = [
        {
            "date": day.isoformat(),
            "activities": [
                {
                    "activity": activity.to_record(),
                    "votes": vote_summary(activity, trip.participant_count, user_id).model_dump(mode="json"),
                }
                for activity in activities
            ],
        }
        for day, activities in group_by_date(list_activities(store, trip)).items()
    ]
    return json_response(200, {"tripId": trip.id, "days": days})
