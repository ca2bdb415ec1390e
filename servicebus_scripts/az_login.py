"""
Azure authentication with a service principal client secret
"""

from datetime import datetime

from azure.identity import ClientSecretCredential

from servicebus_scripts.credentials import ServicePrincipalCredentials

RESOURCE_MANAGER_ENDPOINT = "https://management.azure.com"
MANAGEMENT_SCOPE = f"{RESOURCE_MANAGER_ENDPOINT}/.default"


def azure_login(credentials: ServicePrincipalCredentials):
    """
    Authenticate to Azure with the client credentials grant.
    A token is requested immediately so that bad credentials fail here,
    before any management client is created.
    Returns credential for use with other Azure services.
    """

    credential = ClientSecretCredential(
        tenant_id=credentials.tenant_id,
        client_id=credentials.client_id,
        client_secret=credentials.client_secret,
    )
    print(f"   Requesting token for tenant '{credentials.tenant_id}'...")

    token = credential.get_token(MANAGEMENT_SCOPE)

    expires_at = datetime.fromtimestamp(token.expires_on).isoformat()
    print(f"   Service principal token acquired, expires at {expires_at}")
    return credential
