"""Unit tests for configuration management."""

import os
from unittest.mock import patch

import pydantic
import pytest

from planit.config import _reset_config, get_config


@pytest.fixture(autouse=True)
def _clear_config_cache():
    _reset_config()
    yield
    _reset_config()


def test_get_config_with_dynamodb_endpoint():
    """Test that get_config reads DYNAMODB_ENDPOINT when set."""
    with patch.dict(os.environ, {"DYNAMODB_ENDPOINT": "http://localhost:8000"}):
        config = get_config()
        assert config.dynamodb_endpoint == "http://localhost:8000"


def test_get_config_defaults():
    """Test that get_config provides sensible defaults."""
    with patch.dict(os.environ, {}, clear=True):
        config = get_config()
        assert config.aws_region == "us-east-1"
        assert config.dynamodb_endpoint is None
        assert config.users_table == "PlanitUsers"
        assert config.trips_table == "PlanitTrips"
        assert config.activities_table == "PlanitActivities"
        assert config.store_backend == "dynamodb"
        assert config.environment == "local"


def test_get_config_is_cached():
    with patch.dict(os.environ, {}, clear=True):
        assert get_config() is get_config()


def test_memory_backend_selectable():
    with patch.dict(os.environ, {"STORE_BACKEND": "memory"}, clear=True):
        assert get_config().store_backend == "memory"


def test_unknown_backend_rejected():
    with patch.dict(os.environ, {"STORE_BACKEND": "sqlite"}, clear=True):
        with pytest.raises(pydantic.ValidationError):
            get_config()


def test_config_is_immutable():
    with patch.dict(os.environ, {}, clear=True):
        config = get_config()
        with pytest.raises(pydantic.ValidationError):
            config.aws_region = "eu-west-1"  # type: ignore[misc]
