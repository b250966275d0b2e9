"""Activity ledger: proposing activities for a trip and toggling votes."""

import datetime as dt
import logging

from planit.db import RecordStore
from planit.errors import ErrorCode, NotFoundError, PermissionDeniedError
from planit.models import Activity, Category, Trip
from planit.services.codes import new_id
from planit.services.repository import load_activities, save_activities
from planit.services.trips import get_trip
from planit.services.validation import optional_text, parse_category, require_user, validate_activity_fields

logger = logging.getLogger(__name__)


def add_activity(
    store: RecordStore,
    trip: Trip,
    creator_id: str | None,
    title: str | None,
    date: dt.date | None,
    time: dt.time | None,
    category: Category | str,
    estimated_cost: float | None,
    notes: str | None = None,
) -> Activity:
    creator_id = require_user(creator_id)
    current = get_trip(store, trip.id)
    if not current.has_participant(creator_id):
        raise PermissionDeniedError(
            f"User {creator_id} is not a participant of trip {current.id}",
            code=ErrorCode.NOT_A_PARTICIPANT,
        )

    clean_title = validate_activity_fields(current, title, date, time, estimated_cost)
    clean_notes = optional_text(notes, "Notes")
    activity = Activity(
        id=new_id(),
        trip_id=current.id,
        title=clean_title,
        date=date,
        time=time,
        category=parse_category(category),
        estimated_cost=float(estimated_cost),
        notes=clean_notes,
        created_by=creator_id,
        votes=[],
    )
    save_activities(store, [*load_activities(store), activity])

    logger.info("Added activity %s to trip %s", activity.id, current.id)
    return activity


def list_activities(store: RecordStore, trip: Trip) -> list[Activity]:
    return [activity for activity in load_activities(store) if activity.trip_id == trip.id]


def get_activity(store: RecordStore, activity_id: str) -> Activity:
    for activity in load_activities(store):
        if activity.id == activity_id:
            return activity
    raise NotFoundError(f"Activity {activity_id} not found", code=ErrorCode.ACTIVITY_NOT_FOUND)


def toggle_vote(store: RecordStore, activity_id: str, user_id: str | None) -> Activity:
    """Add the user's vote, or withdraw it if already cast.

    Only current participants may add a vote. Withdrawing is always allowed,
    so a stale vote can still be taken back.
    """
    user_id = require_user(user_id)

    activities = load_activities(store)
    for index, activity in enumerate(activities):
        if activity.id != activity_id:
            continue

        if activity.has_vote_from(user_id):
            votes = [v for v in activity.votes if v != user_id]
        else:
            trip = get_trip(store, activity.trip_id)
            if not trip.has_participant(user_id):
                raise PermissionDeniedError(
                    f"User {user_id} is not a participant of trip {trip.id}",
                    code=ErrorCode.NOT_A_PARTICIPANT,
                )
            votes = [*activity.votes, user_id]

        updated = activity.model_copy(update={"votes": votes})
        activities[index] = updated
        save_activities(store, activities)
        logger.info("User %s toggled vote on activity %s (%d votes)", user_id, activity_id, len(votes))
        return updated

    raise NotFoundError(f"Activity {activity_id} not found", code=ErrorCode.ACTIVITY_NOT_FOUND)
