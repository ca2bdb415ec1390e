import dataclasses
from unittest.mock import MagicMock

import pytest

from servicebus_scripts import clients
from servicebus_scripts.clients import create_clients
from servicebus_scripts.settings import SampleSettings

SUBSCRIPTION_ID = "00000000-0000-0000-0000-000000000003"


@pytest.fixture
def client_classes(monkeypatch):
    resource_class = MagicMock()
    servicebus_class = MagicMock()
    monkeypatch.setattr(clients, "ResourceManagementClient", resource_class)
    monkeypatch.setattr(clients, "ServiceBusManagementClient", servicebus_class)
    return resource_class, servicebus_class


def test_credential_and_subscription_reach_both_clients(client_classes):
    resource_class, servicebus_class = client_classes
    credential = MagicMock()
    settings = SampleSettings()

    context = create_clients(credential, SUBSCRIPTION_ID, settings)

    for client_class in (resource_class, servicebus_class):
        client_class.assert_called_once_with(
            credential,
            SUBSCRIPTION_ID,
            base_url="https://management.azure.com",
            credential_scopes=["https://management.azure.com/.default"],
        )
    assert context.settings is settings
    assert context.groups is resource_class.return_value.resource_groups
    assert context.namespaces is servicebus_class.return_value.namespaces
    assert context.queues is servicebus_class.return_value.queues
    assert context.topics is servicebus_class.return_value.topics
    assert context.subscriptions is servicebus_class.return_value.subscriptions


def test_real_sdk_clients_are_built_without_network():
    context = create_clients(MagicMock(), SUBSCRIPTION_ID, SampleSettings())

    assert hasattr(context.groups, "begin_delete")
    assert hasattr(context.namespaces, "list_keys")
    assert hasattr(context.subscriptions, "create_or_update")


def test_context_is_immutable(context):
    with pytest.raises(dataclasses.FrozenInstanceError):
        context.queues = MagicMock()
