"""
Azure Service Bus queue creation using Azure SDK
"""

from azure.mgmt.servicebus.models import SBQueue


def create_queue(context):
    settings = context.settings

    print(f"Creating queue '{settings.queue_name}'...")
    queue_params = SBQueue(enable_partitioning=settings.enable_partitioning)
    return context.queues.create_or_update(
        settings.resource_group_name,
        settings.namespace_name,
        settings.queue_name,
        queue_params
    )
