from os import environ
from typing import Literal

from pydantic import BaseModel, ConfigDict


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    dynamodb_endpoint: str | None = None
    users_table: str
    trips_table: str
    activities_table: str
    store_backend: Literal["dynamodb", "memory"] = "dynamodb"
    public_base_url: str = ""
    environment: str


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config: for testing only."""
    global _cached_config
    _cached_config = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        dynamodb_endpoint=environ.get("DYNAMODB_ENDPOINT"),
        users_table=environ.get("USERS_TABLE", "PlanitUsers"),
        trips_table=environ.get("TRIPS_TABLE", "PlanitTrips"),
        activities_table=environ.get("ACTIVITIES_TABLE", "PlanitActivities"),
        store_backend=environ.get("STORE_BACKEND", "dynamodb"),
        public_base_url=environ.get("PUBLIC_BASE_URL", ""),
        environment=environ.get("ENVIRONMENT", "local"),
    )
    return _cached_config
