"""Shared test fixtures for Planit."""

import os
import sys
from datetime import date
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Unset AWS_PROFILE for local testing (DynamoDB Local doesn't need it)
if "AWS_PROFILE" in os.environ:
    del os.environ["AWS_PROFILE"]

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture
def store():
    """Empty in-memory record store."""
    from planit.db import InMemoryRecordStore

    return InMemoryRecordStore()


@pytest.fixture
def trip(store):
    """Three-day trip owned by user-owner, budget 500."""
    from planit.services.trips import create_trip

    return create_trip(store, "user-owner", "Lisbon Long Weekend", date(2026, 6, 5), date(2026, 6, 7), 500)


# DynamoDB fixtures
@pytest.fixture
def dynamodb_client():
    """Provide a DynamoDB client for integration tests."""
    import boto3
    from planit.config import get_config

    config = get_config()

    return boto3.client(
        "dynamodb",
        endpoint_url=config.dynamodb_endpoint,
        region_name=config.aws_region,
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )


@pytest.fixture
def dynamo_store(dynamodb_client):
    """Provide a DynamoRecordStore over the local tables, emptied after the test."""
    from planit.config import get_config
    from planit.db import Collection, DynamoRecordStore

    config = get_config()
    tables = {
        Collection.USERS: config.users_table,
        Collection.TRIPS: config.trips_table,
        Collection.ACTIVITIES: config.activities_table,
    }
    yield DynamoRecordStore(dynamodb_client, tables)

    # Cleanup: delete every item created during the test
    for table in tables.values():
        response = dynamodb_client.scan(TableName=table)
        for item in response.get("Items", []):
            dynamodb_client.delete_item(TableName=table, Key={"id": item["id"]})
