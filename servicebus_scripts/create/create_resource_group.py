"""
Azure resource group creation using Azure SDK
"""


def create_resource_group(context):
    """
    Create (or update) the resource group that holds every sample resource
    """
    settings = context.settings

    print(f"Creating resource group '{settings.resource_group_name}'...")
    group = context.groups.create_or_update(
        settings.resource_group_name,
        {"location": settings.location}
    )

    print(f"   Resource group ready in '{settings.location}'")
    return group
