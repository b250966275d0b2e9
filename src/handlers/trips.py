"""Trip endpoints: create, list, fetch, look up by code, join, delete."""

from typing import Any

from handlers.common import api_handler, current_user_id, json_response, parse_body, path_param
from planit.config import get_config
from planit.db import get_record_store
from planit.errors import USER_MESSAGES, ErrorCode
from planit.models import Trip
from planit.services.codes import invite_link, invite_message, invite_path
from planit.services.trips import create_trip, delete_trip, find_by_code, get_trip, join_trip, list_trips_for_user
from planit.services.validation import parse_amount, parse_date, require_user


def _trip_body(trip: Trip) -> dict[str, Any]:
    config = get_config()
    return {
        "trip": trip.to_record(),
        "durationDays": trip.duration_days,
        "invite": {
            "code": trip.trip_code,
            "path": invite_path(trip.trip_code),
            "link": invite_link(config.public_base_url, trip.trip_code),
            "message": invite_message(trip.name, trip.trip_code),
        },
    }


@api_handler
def create_handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    body = parse_body(event)
    trip = create_trip(
        get_record_store(),
        current_user_id(event),
        body.get("name"),
        parse_date(body.get("startDate")),
        parse_date(body.get("endDate")),
        parse_amount(body.get("budget"), ErrorCode.INVALID_BUDGET),
    )
    return json_response(201, _trip_body(trip))


@api_handler
def list_handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    user_id = require_user(current_user_id(event))
    trips = list_trips_for_user(get_record_store(), user_id)
    return json_response(200, {"trips": [trip.to_record() for trip in trips]})


@api_handler
def get_handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    trip = get_trip(get_record_store(), path_param(event, "tripId"))
    return json_response(200, _trip_body(trip))


@api_handler
def find_by_code_handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    trip = find_by_code(get_record_store(), path_param(event, "code"))
    return json_response(200, {"trip": trip.to_record()})


@api_handler
def join_handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    store = get_record_store()
    user_id = require_user(current_user_id(event))
    trip = find_by_code(store, path_param(event, "code"))
    result = join_trip(store, trip, user_id)

    message = USER_MESSAGES[ErrorCode.ALREADY_JOINED] if result.already_joined else f"You've joined {trip.name}!"
    return json_response(
        200,
        {"trip": result.trip.to_record(), "alreadyJoined": result.already_joined, "message": message},
    )


@api_handler
def delete_handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    store = get_record_store()
    trip = get_trip(store, path_param(event, "tripId"))
    delete_trip(store, trip, current_user_id(event))
    return {"statusCode": 204}
