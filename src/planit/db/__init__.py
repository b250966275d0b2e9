"""
Record storage for Planit.

Services receive a RecordStore explicitly; nothing in planit.services holds
module-level state.
"""

from planit.db.dynamo import DynamoRecordStore
from planit.db.interface import Collection, Record, RecordStore, get_record_store
from planit.db.memory import InMemoryRecordStore

__all__ = ["Collection", "DynamoRecordStore", "InMemoryRecordStore", "Record", "RecordStore", "get_record_store"]
