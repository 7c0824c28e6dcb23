# src/mochawatch/exceptions.py

"""
Custom exceptions for mochawatch.
"""


class MochaWatchError(Exception):
    """Base class for all mochawatch errors."""

    pass


class ConfigurationError(MochaWatchError):
    """Raised when the configuration file is missing, unreadable or invalid."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        full_message = message
        if path:
            full_message += f" (Config: '{path}')"
        super().__init__(full_message)


class AlreadyRunningError(MochaWatchError):
    """Raised when a test run is requested while another one is in progress."""

    def __init__(self, message: str = "Already running."):
        super().__init__(message)


# 🔼⚙️
