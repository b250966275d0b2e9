"""Trip registry: creation, lookup by code, joining and deletion."""

import datetime as dt
import logging

from planit.db import RecordStore
from planit.errors import ErrorCode, NotFoundError, PermissionDeniedError, ValidationError
from planit.models import JoinResult, Trip
from planit.services.codes import new_id, normalize_trip_code, unique_trip_code
from planit.services.repository import load_activities, load_trips, save_activities, save_trips
from planit.services.validation import require_user, validate_trip_fields

logger = logging.getLogger(__name__)


def create_trip(
    store: RecordStore,
    owner_id: str | None,
    name: str | None,
    start_date: dt.date | None,
    end_date: dt.date | None,
    budget: float | None = None,
) -> Trip:
    """Create a trip owned by ``owner_id`` with a fresh, unique trip code."""
    owner_id = require_user(owner_id)
    clean_name = validate_trip_fields(name, start_date, end_date, budget)

    trips = load_trips(store)
    trip = Trip(
        id=new_id(),
        name=clean_name,
        start_date=start_date,
        end_date=end_date,
        budget=float(budget) if budget is not None else None,
        created_by=owner_id,
        participants=[owner_id],
        trip_code=unique_trip_code(t.trip_code for t in trips),
    )
    save_trips(store, [*trips, trip])

    logger.info("Created trip %s (%s) for %s", trip.id, trip.trip_code, owner_id)
    return trip


def get_trip(store: RecordStore, trip_id: str) -> Trip:
    for trip in load_trips(store):
        if trip.id == trip_id:
            return trip
    raise NotFoundError(f"Trip {trip_id} not found", code=ErrorCode.TRIP_NOT_FOUND)


def find_by_code(store: RecordStore, code: str | None) -> Trip:
    """Case-insensitive exact match on the trip code."""
    if code is None or not code.strip():
        raise ValidationError("Trip code is required", code=ErrorCode.MISSING_TRIP_CODE)

    wanted = normalize_trip_code(code)
    for trip in load_trips(store):
        if normalize_trip_code(trip.trip_code) == wanted:
            return trip
    raise NotFoundError(f"No trip with code {wanted}", code=ErrorCode.TRIP_CODE_NOT_FOUND)


def join_trip(store: RecordStore, trip: Trip, user_id: str | None) -> JoinResult:
    """Add ``user_id`` to the participants. Joining twice is a no-op."""
    user_id = require_user(user_id)

    trips = load_trips(store)
    for index, current in enumerate(trips):
        if current.id != trip.id:
            continue
        if current.has_participant(user_id):
            return JoinResult(trip=current, already_joined=True)

        joined = current.model_copy(update={"participants": [*current.participants, user_id]})
        trips[index] = joined
        save_trips(store, trips)
        logger.info("User %s joined trip %s", user_id, joined.id)
        return JoinResult(trip=joined, already_joined=False)

    raise NotFoundError(f"Trip {trip.id} not found", code=ErrorCode.TRIP_NOT_FOUND)


def delete_trip(store: RecordStore, trip: Trip, actor_id: str | None) -> None:
    """Delete a trip and all of its activities. Owner only."""
    actor_id = require_user(actor_id)
    current = get_trip(store, trip.id)
    if actor_id != current.created_by:
        raise PermissionDeniedError(
            f"User {actor_id} cannot delete trip {current.id} owned by {current.created_by}",
            code=ErrorCode.NOT_TRIP_OWNER,
        )

    # Activities go first so none is ever left pointing at a deleted trip.
    activities = load_activities(store)
    remaining = [a for a in activities if a.trip_id != current.id]
    if len(remaining) != len(activities):
        save_activities(store, remaining)

    save_trips(store, [t for t in load_trips(store) if t.id != current.id])
    logger.info(
        "Deleted trip %s and %d activities",
        current.id,
        len(activities) - len(remaining),
    )


def list_trips_for_user(store: RecordStore, user_id: str) -> list[Trip]:
    return [trip for trip in load_trips(store) if trip.has_participant(user_id)]
