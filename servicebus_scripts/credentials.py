"""
Service principal credentials read from the process environment
"""

import os
from dataclasses import dataclass

from servicebus_scripts.errors import MissingEnvironmentVariableError

TENANT_ID_VAR = "AZURE_TENANT_ID"
CLIENT_ID_VAR = "AZURE_CLIENT_ID"
CLIENT_SECRET_VAR = "AZURE_CLIENT_SECRET"
SUBSCRIPTION_ID_VAR = "AZURE_SUBSCRIPTION_ID"

REQUIRED_VARS = (TENANT_ID_VAR, CLIENT_ID_VAR, CLIENT_SECRET_VAR, SUBSCRIPTION_ID_VAR)


@dataclass(frozen=True)
class ServicePrincipalCredentials:
    tenant_id: str
    client_id: str
    client_secret: str
    subscription_id: str

    def __repr__(self):
        # Keep the secret out of tracebacks and --verbose output
        return (
            f"ServicePrincipalCredentials(tenant_id={self.tenant_id!r}, "
            f"client_id={self.client_id!r}, client_secret='***', "
            f"subscription_id={self.subscription_id!r})"
        )


def get_env_var(var_name: str, environ=None) -> str:
    """
    Return the value of an environment variable.
    Raises MissingEnvironmentVariableError when it is unset or empty.
    """
    if environ is None:
        environ = os.environ

    value = environ.get(var_name, "")
    if not value:
        raise MissingEnvironmentVariableError(var_name)
    return value


def load_credentials(environ=None) -> ServicePrincipalCredentials:
    """
    Read the four service principal variables, failing on the first one missing
    """
    values = [get_env_var(var_name, environ) for var_name in REQUIRED_VARS]
    return ServicePrincipalCredentials(*values)
