#!/usr/bin/env python3
"""
Azure Service Bus Management Sample

Provisions a small Service Bus setup inside a dedicated resource group:
- Resource group and messaging namespace
- Shared access authorization rule, printing its keys and connection strings
- Partitioned queue and topic, plus a subscription on the topic

Then waits for Enter and deletes the resource group, which removes everything
created above. Requires AZURE_TENANT_ID, AZURE_CLIENT_ID, AZURE_CLIENT_SECRET
and AZURE_SUBSCRIPTION_ID for a service principal allowed to manage the
subscription.
"""

import argparse
import sys
import traceback

from azure.core.exceptions import AzureError

from servicebus_scripts import az_login
from servicebus_scripts.clients import create_clients
from servicebus_scripts.credentials import load_credentials
from servicebus_scripts.errors import MissingEnvironmentVariableError, SettingsError
from servicebus_scripts.sequence import PROVISIONING_STEPS, TEARDOWN_STEP, run_steps
from servicebus_scripts.settings import load_settings

TEARDOWN_PROMPT = "Press enter to delete all the resources created in this sample..."


def print_status(message, level="info"):
    """Simple console output with different levels"""
    if level == "header":
        print(f"\n{message}")
        print("=" * len(message))
    elif level == "section":
        print(f"\n{message}")
    else:
        print(message)


def report_failure(message: str, error: BaseException, verbose: bool):
    """Print the one line diagnostic, plus the traceback when asked for"""
    print(message)
    if not verbose:
        return

    print_status(f"   Error type: {type(error).__name__}")
    print_status("Full traceback:", "section")
    tb_lines = traceback.format_exception(type(error), error, error.__traceback__)
    for line in "".join(tb_lines).split('\n'):
        if line.strip():
            print_status(line)


def wait_for_teardown():
    """Block until the user presses Enter; a closed stdin counts as Enter"""
    try:
        input(TEARDOWN_PROMPT)
    except EOFError:
        print()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='az-servicebus',
        description='Create Azure Service Bus resources, then delete them on Enter.')
    parser.add_argument('--config', type=str, help='Optional: YAML file overriding resource names and location.')
    parser.add_argument('--verbose', action='store_true', help='Print the error type and traceback on failure.')
    return parser.parse_args(argv)


def run(argv=None) -> int:
    """Run the whole sample and return the process exit code"""
    args = parse_args(argv)

    print_status("Azure Service Bus Management Sample", "header")

    print_status("Loading configuration...", "section")
    try:
        credentials = load_credentials()
        settings = load_settings(args.config)
    except MissingEnvironmentVariableError as e:
        print(e)
        return 1
    except SettingsError as e:
        report_failure(f"Configuration load failed: {e}", e, args.verbose)
        return 1

    print_status("Configuration loaded successfully")
    print_status(f"SUBSCRIPTION: {credentials.subscription_id}")
    for key, value in vars(settings).items():
        print_status(f"{key}: {value}")

    print_status("Azure Authentication", "section")
    try:
        credential = az_login.azure_login(credentials)
    except (AzureError, ValueError) as e:
        report_failure(f"Token acquisition failed: {e}", e, args.verbose)
        return 1

    print_status("Initializing Management Clients", "section")
    context = create_clients(credential, credentials.subscription_id, settings)
    print_status("Resource and Service Bus clients initialized")

    print_status("Provisioning Resources", "section")
    results = run_steps(PROVISIONING_STEPS, context)
    if not results[-1].ok:
        report_failure(results[-1].describe_failure(), results[-1].error, args.verbose)
        return 1

    print_status("Teardown", "section")
    wait_for_teardown()
    results = run_steps([TEARDOWN_STEP], context)
    if not results[-1].ok:
        report_failure(results[-1].describe_failure(), results[-1].error, args.verbose)
        return 1

    print_status("SAMPLE COMPLETED", "header")
    return 0


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
