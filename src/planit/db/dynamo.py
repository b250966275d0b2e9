"""DynamoDB record store: one table per collection, each record stored as JSON."""

import json
import logging
from typing import Any

from planit.db.interface import Collection, Record, RecordStore

logger = logging.getLogger(__name__)


class DynamoRecordStore(RecordStore):
    def __init__(self, dynamo_client: Any, tables: dict[Collection, str]) -> None:
        self._client = dynamo_client
        self._tables = tables

    def _table(self, collection: Collection) -> str:
        return self._tables[Collection(collection)]

    def _scan(self, table: str) -> list[dict[str, Any]]:
        items: list[dict[str, Any]] = []
        last_key = None

        while True:
            scan_kwargs: dict[str, Any] = {"TableName": table}
            if last_key:
                scan_kwargs["ExclusiveStartKey"] = last_key

            response = self._client.scan(**scan_kwargs)
            items.extend(response.get("Items", []))

            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break

        return items

    def get(self, collection: Collection) -> list[Record]:
        return [json.loads(item["record"]["S"]) for item in self._scan(self._table(collection))]

    def put(self, collection: Collection, records: list[Record]) -> None:
        """Replace the collection: write every record, then delete items no longer present."""
        table = self._table(collection)
        existing_ids = {item["id"]["S"] for item in self._scan(table)}
        new_ids = {record["id"] for record in records}

        for record in records:
            self._client.put_item(
                TableName=table,
                Item={"id": {"S": record["id"]}, "record": {"S": json.dumps(record)}},
            )

        removed = existing_ids - new_ids
        for record_id in removed:
            self._client.delete_item(TableName=table, Key={"id": {"S": record_id}})

        logger.debug("Wrote %d records to %s, removed %d", len(records), table, len(removed))
