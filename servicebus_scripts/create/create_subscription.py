"""
Azure Service Bus topic subscription creation using Azure SDK
"""

from azure.mgmt.servicebus.models import SBSubscription


def create_subscription(context):
    """
    Create a subscription on the sample topic; the topic must already exist
    """
    settings = context.settings

    print(f"Creating subscription '{settings.subscription_name}'...")
    return context.subscriptions.create_or_update(
        settings.resource_group_name,
        settings.namespace_name,
        settings.topic_name,
        settings.subscription_name,
        SBSubscription()
    )
