"""
Resource names and location used by the sample, with optional YAML overrides
"""

import os
from dataclasses import dataclass, replace

import yaml

from servicebus_scripts.errors import SettingsError

# Basic namespaces cannot hold topics
SUPPORTED_SKUS = ("Standard", "Premium")

# YAML key -> SampleSettings field
SETTINGS_KEYS = {
    "LOCATION": "location",
    "RESOURCE_GROUP": "resource_group_name",
    "NAMESPACE": "namespace_name",
    "AUTH_RULE": "auth_rule_name",
    "QUEUE": "queue_name",
    "TOPIC": "topic_name",
    "SUBSCRIPTION_NAME": "subscription_name",
    "SKU": "sku",
    "ENABLE_PARTITIONING": "enable_partitioning",
}


@dataclass(frozen=True)
class SampleSettings:
    location: str = "westus"
    resource_group_name: str = "azure-sample"
    namespace_name: str = "pythonrocksonazure"
    auth_rule_name: str = "authrule"
    queue_name: str = "queue1"
    topic_name: str = "topic1"
    subscription_name: str = "sub1"
    sku: str = "Standard"
    enable_partitioning: bool = True


def load_config(config_file_path: str) -> dict:
    """Load configuration from a YAML file"""

    if not os.path.exists(config_file_path):
        raise SettingsError(f"Configuration file not found: {config_file_path}")

    if not os.path.isfile(config_file_path):
        raise SettingsError(f"Configuration path is not a file: {config_file_path}")

    try:
        with open(config_file_path, 'r', encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SettingsError(f"Invalid YAML in {config_file_path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise SettingsError(f"Cannot read {config_file_path}: {e}") from e

    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise SettingsError(f"Configuration file must contain a mapping: {config_file_path}")

    return config


def load_settings(config_file_path: str = None) -> SampleSettings:
    """
    Build the settings for a run.

    Without a path the built-in defaults are used. Otherwise every key found in
    the file replaces the matching default. Unknown keys are rejected.
    """
    settings = SampleSettings()
    if config_file_path is None:
        return settings

    config = load_config(config_file_path)

    unknown = sorted(str(key) for key in config if key not in SETTINGS_KEYS)
    if unknown:
        raise SettingsError(f"Unknown configuration keys: {', '.join(unknown)}")

    overrides = {}
    for key, value in config.items():
        field_name = SETTINGS_KEYS[key]
        if field_name == "enable_partitioning":
            if not isinstance(value, bool):
                raise SettingsError(f"{key} must be true or false, got {value!r}")
        elif not isinstance(value, str) or not value:
            raise SettingsError(f"{key} must be a non-empty string, got {value!r}")
        overrides[field_name] = value

    settings = replace(settings, **overrides)

    if settings.sku not in SUPPORTED_SKUS:
        raise SettingsError(
            f"Unsupported SKU '{settings.sku}', expected one of: {', '.join(SUPPORTED_SKUS)}"
        )

    # Premium namespaces do not take entity level partitioning
    if settings.sku == "Premium" and settings.enable_partitioning:
        raise SettingsError("SKU Premium requires ENABLE_PARTITIONING: false")

    return settings
