"""In-memory record store for a single session and for tests."""

from copy import deepcopy

from planit.db.interface import Collection, Record, RecordStore


class InMemoryRecordStore(RecordStore):
    def __init__(self, initial: dict[Collection, list[Record]] | None = None) -> None:
        self._collections: dict[Collection, list[Record]] = {c: [] for c in Collection}
        for collection, records in (initial or {}).items():
            self._collections[Collection(collection)] = deepcopy(records)

    def get(self, collection: Collection) -> list[Record]:
        return deepcopy(self._collections[Collection(collection)])

    def put(self, collection: Collection, records: list[Record]) -> None:
        self._collections[Collection(collection)] = deepcopy(records)
