"""
Shared pytest fixtures and configuration for pagewindow tests.

Provides toy user collections (keys "a10".."a30"), helpers to build entry
streams and a mocked boto3 DynamoDB client for source tests.
"""

import random
from typing import Any
from unittest.mock import MagicMock

import pytest

from pagewindow import Entry


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line("markers", "slow: Slow tests that may take longer")


def toy_keys(first: int, last: int) -> list[str]:
    """Keys "a<first>".."a<last>"; two-digit numbers keep string order numeric."""
    return [f"a{n}" for n in range(first, last + 1)]


def toy_entries(first: int, last: int) -> list[Entry[str, dict[str, Any]]]:
    return [Entry(key, {"name": key, "domain": "local"}) for key in toy_keys(first, last)]


@pytest.fixture
def make_toy_users():
    """Factory fixture: make_toy_users(10, 30) -> entries a10..a30."""
    return toy_entries


@pytest.fixture
def toy_users() -> list[Entry[str, dict[str, Any]]]:
    """Twenty-one users a10..a30, in ascending order."""
    return toy_entries(10, 30)


@pytest.fixture
def shuffled_toy_users(toy_users) -> list[Entry[str, dict[str, Any]]]:
    """The same users in a fixed pseudo-random order."""
    shuffled = list(toy_users)
    random.Random(42).shuffle(shuffled)
    return shuffled


@pytest.fixture
def mock_client():
    """
    Creates a fully mocked boto3 DynamoDB client.

    The scan paginator yields nothing unless a test sets pages on it.
    """
    client = MagicMock()
    client.get_paginator.return_value.paginate.return_value = iter([])
    return client


@pytest.fixture
def dynamo_user_items() -> list[dict[str, Any]]:
    """Users in DynamoDB JSON format, as returned by a scan."""
    return [
        {
            "name": {"S": name},
            "domain": {"S": domain},
            "roles": {"L": [{"S": role} for role in roles]},
            "logins": {"N": str(logins)},
        }
        for name, domain, roles, logins in [
            ("carol", "local", ["admin"], 3),
            ("alice", "external", ["ro_admin"], 10),
            ("bob", "local", [], 0),
            ("alice", "local", ["admin", "ro_admin"], 7),
            ("dave", "external", ["replication_admin"], 1),
        ]
    ]
