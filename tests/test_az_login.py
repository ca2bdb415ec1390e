from unittest.mock import MagicMock

import pytest
from azure.core.credentials import AccessToken
from azure.core.exceptions import ClientAuthenticationError

from servicebus_scripts import az_login
from servicebus_scripts.credentials import load_credentials


@pytest.fixture
def credential_class(monkeypatch):
    credential_class = MagicMock()
    credential_class.return_value.get_token.return_value = AccessToken("secret-token", 1700000000)
    monkeypatch.setattr(az_login, "ClientSecretCredential", credential_class)
    return credential_class


def test_token_requested_for_resource_manager(azure_env, credential_class):
    credential = az_login.azure_login(load_credentials())

    assert credential is credential_class.return_value
    credential_class.assert_called_once_with(
        tenant_id=azure_env["AZURE_TENANT_ID"],
        client_id=azure_env["AZURE_CLIENT_ID"],
        client_secret=azure_env["AZURE_CLIENT_SECRET"],
    )
    credential.get_token.assert_called_once_with("https://management.azure.com/.default")


def test_token_and_secret_are_not_printed(azure_env, credential_class, capsys):
    az_login.azure_login(load_credentials())

    out = capsys.readouterr().out
    assert "secret-token" not in out
    assert azure_env["AZURE_CLIENT_SECRET"] not in out
    assert "token acquired" in out


def test_authentication_error_propagates(azure_env, credential_class):
    credential_class.return_value.get_token.side_effect = ClientAuthenticationError("invalid_client")

    with pytest.raises(ClientAuthenticationError):
        az_login.azure_login(load_credentials())


def test_malformed_tenant_propagates(azure_env, credential_class):
    credential_class.side_effect = ValueError("Invalid tenant ID provided")

    with pytest.raises(ValueError, match="Invalid tenant ID"):
        az_login.azure_login(load_credentials())
