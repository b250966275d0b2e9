"""Integration tests for the DynamoDB record store against DynamoDB Local."""

from datetime import date, time

import pytest

from planit.db import Collection
from planit.services.activities import add_activity, list_activities, toggle_vote
from planit.services.trips import create_trip, delete_trip, find_by_code, join_trip


@pytest.mark.integration
def test_put_and_get_records(dynamo_store):
    dynamo_store.put(Collection.USERS, [{"id": "u1", "email": "ana@example.com", "name": "Ana"}])

    assert dynamo_store.get(Collection.USERS) == [{"id": "u1", "email": "ana@example.com", "name": "Ana"}]


@pytest.mark.integration
def test_put_replaces_collection(dynamo_store):
    dynamo_store.put(Collection.TRIPS, [{"id": "t1"}, {"id": "t2"}])
    dynamo_store.put(Collection.TRIPS, [{"id": "t2"}])

    assert dynamo_store.get(Collection.TRIPS) == [{"id": "t2"}]


@pytest.mark.integration
def test_trip_lifecycle(dynamo_store):
    trip = create_trip(dynamo_store, "u1", "Lisbon", date(2026, 6, 5), date(2026, 6, 7), 300)
    join_trip(dynamo_store, find_by_code(dynamo_store, trip.trip_code.lower()), "u2")

    activity = add_activity(dynamo_store, trip, "u2", "Surf lesson", date(2026, 6, 6), time(10), "Adventure", 60)
    voted = toggle_vote(dynamo_store, activity.id, "u1")
    assert voted.votes == ["u1"]

    delete_trip(dynamo_store, trip, "u1")
    assert dynamo_store.get(Collection.TRIPS) == []
    assert list_activities(dynamo_store, trip) == []
