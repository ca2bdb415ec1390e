"""
Azure resource group removal using Azure SDK
"""


def delete_resource_group(context):
    """
    Delete the resource group and wait for the deletion to finish.
    Everything created inside it goes with it.
    """
    settings = context.settings

    print(f"Deleting resource group '{settings.resource_group_name}'...")
    poller = context.groups.begin_delete(settings.resource_group_name)
    poller.result()

    print(f"   Resource group '{settings.resource_group_name}' deleted")
