"""
Azure Service Bus topic creation using Azure SDK
"""

from azure.mgmt.servicebus.models import SBTopic


def create_topic(context):
    settings = context.settings

    print(f"Creating topic '{settings.topic_name}'...")
    topic_params = SBTopic(enable_partitioning=settings.enable_partitioning)
    return context.topics.create_or_update(
        settings.resource_group_name,
        settings.namespace_name,
        settings.topic_name,
        topic_params
    )
