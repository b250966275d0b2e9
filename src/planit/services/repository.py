"""Typed reads and writes of whole collections over a RecordStore."""

from planit.db import Collection, RecordStore
from planit.models import Activity, Trip, User


def load_users(store: RecordStore) -> list[User]:
    return [User.model_validate(record) for record in store.get(Collection.USERS)]


def save_users(store: RecordStore, users: list[User]) -> None:
    store.put(Collection.USERS, [user.to_record() for user in users])


def load_trips(store: RecordStore) -> list[Trip]:
    return [Trip.model_validate(record) for record in store.get(Collection.TRIPS)]


def save_trips(store: RecordStore, trips: list[Trip]) -> None:
    store.put(Collection.TRIPS, [trip.to_record() for trip in trips])


def load_activities(store: RecordStore) -> list[Activity]:
    return [Activity.model_validate(record) for record in store.get(Collection.ACTIVITIES)]


def save_activities(store: RecordStore, activities: list[Activity]) -> None:
    store.put(Collection.ACTIVITIES, [activity.to_record() for activity in activities])
