"""
Error types raised before any Service Bus resource is touched
"""


class ServiceBusSampleError(Exception):
    """Base class for configuration problems detected by the sample"""


class MissingEnvironmentVariableError(ServiceBusSampleError):
    def __init__(self, var_name: str):
        self.var_name = var_name
        super().__init__(f"Missing environment variable {var_name}")


class SettingsError(ServiceBusSampleError):
    """Raised when the optional settings file cannot be used"""
