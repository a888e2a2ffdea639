from typing import Optional


class ReporterError(Exception):
    """
    Base error for the reporter.

    Args:
        message (str): The error message.
    """
    def __init__(self, message: str = "An error occurred while setting up the reporter."):
        self.message = message
        super().__init__(self.message)


class ReporterConfigurationError(ReporterError):
    """
    Error raised when the reporter is constructed with invalid settings.

    Args:
        setting (str): Name of the offending setting.
        value: The rejected value.
        reason (Optional[str]): Why the value was rejected.
    """
    def __init__(self, setting: str, value: object, reason: Optional[str] = None):
        self.setting = setting
        self.value = value
        info = f" {reason}" if reason else ""
        super().__init__(f"Invalid reporter setting {setting}={value!r}.{info}")


class TimezoneNotFoundError(ReporterConfigurationError):
    """
    Error raised when the reference timezone is not in the timezone database.

    Args:
        name (str): The timezone identifier that could not be resolved.
    """
    def __init__(self, name: str):
        super().__init__(
            "timezone",
            name,
            reason="The zone is not present in the timezone database; install tzdata "
                   "or configure a different zone.",
        )
