from datetime import date, time, timezone

import pytest
from pydantic import ValidationError

from planit.models import Activity, Category, Trip, User

VALID_TRIP = dict(
    id="trip-1",
    name="Lisbon",
    start_date=date(2026, 6, 5),
    end_date=date(2026, 6, 7),
    budget=500.0,
    created_by="u1",
    participants=["u1", "u2"],
    trip_code="AB12CD",
)

VALID_ACTIVITY = dict(
    id="act-1",
    trip_id="trip-1",
    title="Tram 28",
    date=date(2026, 6, 6),
    time=time(9, 30),
    category=Category.SIGHTSEEING,
    estimated_cost=3.0,
    created_by="u1",
)


# --- Trip ---


def test_trip_valid():
    trip = Trip(**VALID_TRIP)
    assert trip.participant_count == 2
    assert trip.has_participant("u2")


def test_trip_single_day_allowed():
    trip = Trip(**{**VALID_TRIP, "end_date": date(2026, 6, 5)})
    assert trip.covers(date(2026, 6, 5))


def test_trip_end_before_start():
    with pytest.raises(ValidationError):
        Trip(**{**VALID_TRIP, "end_date": date(2026, 6, 4)})


def test_trip_owner_must_participate():
    with pytest.raises(ValidationError):
        Trip(**{**VALID_TRIP, "participants": ["u2"]})


def test_trip_negative_budget():
    with pytest.raises(ValidationError):
        Trip(**{**VALID_TRIP, "budget": -1})


def test_trip_code_must_be_six_uppercase_alphanumerics():
    with pytest.raises(ValidationError):
        Trip(**{**VALID_TRIP, "trip_code": "ab12cd"})
    with pytest.raises(ValidationError):
        Trip(**{**VALID_TRIP, "trip_code": "AB12C"})


def test_trip_covers_is_inclusive():
    trip = Trip(**VALID_TRIP)
    assert trip.covers(date(2026, 6, 5))
    assert trip.covers(date(2026, 6, 7))
    assert not trip.covers(date(2026, 6, 8))


def test_trip_duration_counts_both_ends():
    assert Trip(**VALID_TRIP).duration_days == 3
    assert Trip(**{**VALID_TRIP, "end_date": date(2026, 6, 5)}).duration_days == 1


def test_trip_record_uses_camel_case():
    record = Trip(**VALID_TRIP).to_record()
    assert record["startDate"] == "2026-06-05"
    assert record["tripCode"] == "AB12CD"
    assert record["createdBy"] == "u1"
    assert Trip.model_validate(record) == Trip(**VALID_TRIP)


# --- Activity ---


def test_activity_defaults_to_no_votes():
    activity = Activity(**VALID_ACTIVITY)
    assert activity.votes == []
    assert activity.vote_count == 0
    assert activity.notes is None


def test_activity_negative_cost():
    with pytest.raises(ValidationError):
        Activity(**{**VALID_ACTIVITY, "estimated_cost": -0.01})


def test_activity_unknown_category():
    with pytest.raises(ValidationError):
        Activity(**{**VALID_ACTIVITY, "category": "Shopping"})


def test_activity_time_rejects_utc_offset():
    with pytest.raises(ValidationError):
        Activity(**{**VALID_ACTIVITY, "time": time(9, 30, tzinfo=timezone.utc)})
    with pytest.raises(ValidationError):
        Activity.model_validate({**VALID_ACTIVITY, "time": "09:30+02:00"})


def test_activity_parses_web_client_record():
    activity = Activity.model_validate(
        {
            "id": "act-2",
            "tripId": "trip-1",
            "title": "Pastéis",
            "date": "2026-06-05",
            "time": "16:00",
            "category": "Food",
            "estimatedCost": 12,
            "createdBy": "u2",
            "votes": ["u1"],
        }
    )
    assert activity.time == time(16, 0)
    assert activity.category is Category.FOOD
    assert activity.has_vote_from("u1")


# --- User ---


def test_user_requires_name():
    with pytest.raises(ValidationError):
        User(id="u1", email="a@example.com", name="")
