"""
Management clients shared by every provisioning step
"""

from dataclasses import dataclass
from typing import Any

from azure.mgmt.resource import ResourceManagementClient
from azure.mgmt.servicebus import ServiceBusManagementClient

from servicebus_scripts.az_login import MANAGEMENT_SCOPE, RESOURCE_MANAGER_ENDPOINT
from servicebus_scripts.settings import SampleSettings


@dataclass(frozen=True)
class ServiceBusContext:
    """
    Everything a step needs: the names for this run and one operations
    client per resource kind. Built once, never mutated.
    """
    settings: SampleSettings
    groups: Any
    namespaces: Any
    queues: Any
    topics: Any
    subscriptions: Any


def create_clients(credential, subscription_id: str, settings: SampleSettings) -> ServiceBusContext:
    """
    Create the Resource Manager and Service Bus clients for the subscription
    """
    client_options = {
        "base_url": RESOURCE_MANAGER_ENDPOINT,
        "credential_scopes": [MANAGEMENT_SCOPE],
    }
    resource_client = ResourceManagementClient(credential, subscription_id, **client_options)
    servicebus_client = ServiceBusManagementClient(credential, subscription_id, **client_options)

    return ServiceBusContext(
        settings=settings,
        groups=resource_client.resource_groups,
        namespaces=servicebus_client.namespaces,
        queues=servicebus_client.queues,
        topics=servicebus_client.topics,
        subscriptions=servicebus_client.subscriptions,
    )
