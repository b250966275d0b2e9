"""Activity endpoints: propose, list with vote status, toggle vote."""

from typing import Any

from handlers.common import api_handler, current_user_id, json_response, parse_body, path_param
from planit.db import get_record_store
from planit.errors import ErrorCode
from planit.models import Activity, Category
from planit.services.activities import add_activity, list_activities, toggle_vote
from planit.services.quorum import vote_summary
from planit.services.trips import get_trip
from planit.services.validation import parse_amount, parse_date, parse_time, require_user


def _activity_body(activity: Activity, participant_count: int, user_id: str | None) -> dict[str, Any]:
    return {
        "activity": activity.to_record(),
        "votes": vote_summary(activity, participant_count, user_id).model_dump(mode="json"),
    }


@api_handler
def add_handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    store = get_record_store()
    user_id = require_user(current_user_id(event))
    trip = get_trip(store, path_param(event, "tripId"))
    body = parse_body(event)

    activity = add_activity(
        store,
        trip,
        user_id,
        body.get("title"),
        parse_date(body.get("date"), ErrorCode.MISSING_DATE_TIME),
        parse_time(body.get("time")),
        body.get("category", Category.ADVENTURE.value),
        parse_amount(body.get("estimatedCost"), ErrorCode.INVALID_COST),
        body.get("notes"),
    )
    return json_response(201, _activity_body(activity, trip.participant_count, user_id))


@api_handler
def list_handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    store = get_record_store()
    user_id = current_user_id(event)
    trip = get_trip(store, path_param(event, "tripId"))

    return json_response(
        200,
        {"activities": [_activity_body(a, trip.participant_count, user_id) for a in list_activities(store, trip)]},
    )


@api_handler
def vote_handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    store = get_record_store()
    user_id = current_user_id(event)
    activity = toggle_vote(store, path_param(event, "activityId"), user_id)
    trip = get_trip(store, activity.trip_id)
    return json_response(200, _activity_body(activity, trip.participant_count, user_id))
