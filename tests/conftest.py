"""Shared fixtures: fake environment and mock management clients"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from servicebus_scripts.clients import ServiceBusContext
from servicebus_scripts.settings import SampleSettings


@pytest.fixture
def azure_env(monkeypatch):
    values = {
        "AZURE_TENANT_ID": "00000000-0000-0000-0000-000000000001",
        "AZURE_CLIENT_ID": "00000000-0000-0000-0000-000000000002",
        "AZURE_CLIENT_SECRET": "not-a-real-secret",
        "AZURE_SUBSCRIPTION_ID": "00000000-0000-0000-0000-000000000003",
    }
    for name, value in values.items():
        monkeypatch.setenv(name, value)
    return values


@pytest.fixture
def manager():
    """
    Parent mock of the five operations clients, so that manager.mock_calls
    records every management call in the order it was made.
    """
    manager = MagicMock()
    manager.namespaces.list_keys.return_value = SimpleNamespace(
        key_name="k1",
        primary_key="p1",
        secondary_key="s1",
        primary_connection_string="Endpoint=sb://primary/;SharedAccessKeyName=k1",
        secondary_connection_string="Endpoint=sb://secondary/;SharedAccessKeyName=k1",
    )
    return manager


@pytest.fixture
def context(manager):
    return ServiceBusContext(
        settings=SampleSettings(),
        groups=manager.groups,
        namespaces=manager.namespaces,
        queues=manager.queues,
        topics=manager.topics,
        subscriptions=manager.subscriptions,
    )


@pytest.fixture
def api_calls():
    """Names of the management calls made, ignoring poller .result() calls"""
    def _api_calls(manager):
        return [name for name, _, _ in manager.mock_calls if "()" not in name]
    return _api_calls
