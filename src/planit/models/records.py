"""Stored records: users, trips and activities.

Records round-trip through the record store as JSON dicts keyed by the
camelCase names the web client uses (``startDate``, ``tripCode``, ...).
"""

import datetime as dt
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class Category(str, Enum):
    ADVENTURE = "Adventure"
    FOOD = "Food"
    SIGHTSEEING = "Sightseeing"
    OTHER = "Other"


class PlanitRecord(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class User(PlanitRecord):
    id: str
    email: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)


class Trip(PlanitRecord):
    id: str
    name: str = Field(..., min_length=1)
    start_date: dt.date
    end_date: dt.date
    budget: float | None = Field(default=None, ge=0)
    created_by: str
    participants: list[str] = Field(..., min_length=1)
    trip_code: str = Field(..., pattern="^[A-Z0-9]{6}$")

    @model_validator(mode="after")
    def check_dates_and_owner(self) -> "Trip":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        if self.created_by not in self.participants:
            raise ValueError("participants must include created_by")
        return self

    @property
    def participant_count(self) -> int:
        return len(self.participants)

    def has_participant(self, user_id: str) -> bool:
        return user_id in self.participants

    @property
    def duration_days(self) -> int:
        """Number of calendar days, counting both ends."""
        return (self.end_date - self.start_date).days + 1

    def covers(self, day: dt.date) -> bool:
        """True when ``day`` falls inside the trip, both ends inclusive."""
        return self.start_date <= day <= self.end_date


class Activity(PlanitRecord):
    id: str
    trip_id: str
    title: str = Field(..., min_length=1)
    date: dt.date
    time: dt.time
    category: Category
    estimated_cost: float = Field(..., ge=0)
    notes: str | None = None
    created_by: str
    votes: list[str] = []

    @field_validator("time")
    @classmethod
    def time_is_naive(cls, value: dt.time) -> dt.time:
        if value.tzinfo is not None:
            raise ValueError("time must be a plain time of day without a UTC offset")
        return value

    @property
    def vote_count(self) -> int:
        return len(self.votes)

    def has_vote_from(self, user_id: str) -> bool:
        return user_id in self.votes
