"""Exceptions raised while locating settings and opening connections."""

from typing import Optional


class ConnectionHelperError(Exception):
    """Base exception for connection lookup and connection opening."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.original_error = original_error
        super().__init__(message)


class ConfigError(ConnectionHelperError):
    """Raised when no usable connection properties file can be read."""


class DriverNotFoundError(ConnectionHelperError):
    """Raised when the configured driver module cannot be loaded."""

    def __init__(self, driver: str, original_error: Optional[Exception] = None):
        self.driver = driver
        msg = str(original_error) if original_error else f"Driver not found: {driver}"
        super().__init__(msg, original_error)


class ConnectionFailedError(ConnectionHelperError):
    """Raised when the driver refuses to open the connection."""

    def __init__(self, url: str, original_error: Exception):
        self.url = url
        super().__init__(str(original_error), original_error)
