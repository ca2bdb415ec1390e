"""
Azure Service Bus namespace creation using Azure SDK
"""

from azure.mgmt.servicebus.models import SBNamespace, SBSku


def create_namespace(context):
    """
    Create the messaging namespace and wait for the long running operation.

    The poller completes when Resource Manager reports the deployment done;
    the namespace status itself is not polled until it reads Active.
    """
    settings = context.settings

    print(f"Creating namespace '{settings.namespace_name}'...")
    namespace_params = SBNamespace(
        location=settings.location,
        sku=SBSku(name=settings.sku, tier=settings.sku),
    )
    poller = context.namespaces.begin_create_or_update(
        settings.resource_group_name,
        settings.namespace_name,
        namespace_params
    )
    namespace = poller.result()

    print(f"   Namespace created with SKU '{settings.sku}'")
    return namespace
