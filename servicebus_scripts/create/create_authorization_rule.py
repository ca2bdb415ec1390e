"""
Shared access authorization rule creation and key listing using Azure SDK
"""

from azure.mgmt.servicebus.models import AccessRights, SBAuthorizationRule

RULE_RIGHTS = [AccessRights.LISTEN, AccessRights.MANAGE, AccessRights.SEND]


def create_authorization_rule(context):
    """
    Create a namespace level rule granting Listen, Manage and Send
    """
    settings = context.settings

    print(
        f"Creating authorization rule '{settings.auth_rule_name}' "
        f"for namespace '{settings.namespace_name}'..."
    )
    rule_params = SBAuthorizationRule(rights=RULE_RIGHTS)
    return context.namespaces.create_or_update_authorization_rule(
        settings.resource_group_name,
        settings.namespace_name,
        settings.auth_rule_name,
        rule_params
    )


def list_keys(context):
    """
    Fetch the keys and connection strings of the authorization rule
    and print them in clear text.
    """
    settings = context.settings

    print(f"List keys for '{settings.namespace_name}' namespace...")
    keys = context.namespaces.list_keys(
        settings.resource_group_name,
        settings.namespace_name,
        settings.auth_rule_name
    )

    print(f"\tKey name: {keys.key_name}")
    print(f"\tPrimary key: {keys.primary_key}")
    print(f"\tSecondary key: {keys.secondary_key}")
    print(f"\tPrimary connection string: {keys.primary_connection_string}")
    print(f"\tSecondary connection string: {keys.secondary_connection_string}")
    return keys
