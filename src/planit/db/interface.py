from abc import ABC, abstractmethod
from enum import Enum
from functools import lru_cache
from typing import Any

Record = dict[str, Any]


class Collection(str, Enum):
    USERS = "users"
    TRIPS = "trips"
    ACTIVITIES = "activities"


class RecordStore(ABC):
    """Whole-collection record store.

    ``put`` replaces the entire collection. Two writers that read, modify and
    put the same collection race, and the last put wins.
    """

    @abstractmethod
    def get(self, collection: Collection) -> list[Record]: ...

    @abstractmethod
    def put(self, collection: Collection, records: list[Record]) -> None: ...


@lru_cache(maxsize=1)
def _memory_store() -> RecordStore:
    from planit.db.memory import InMemoryRecordStore

    return InMemoryRecordStore()


def get_record_store() -> RecordStore:
    from planit.config import get_config

    config = get_config()
    if config.store_backend == "memory":
        # Shared by every call in this process
        return _memory_store()

    from planit.clients import get_dynamo_client
    from planit.db.dynamo import DynamoRecordStore

    return DynamoRecordStore(
        get_dynamo_client(),
        tables={
            Collection.USERS: config.users_table,
            Collection.TRIPS: config.trips_table,
            Collection.ACTIVITIES: config.activities_table,
        },
    )
