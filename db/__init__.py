"""Database connection utilities."""

from .connection import (
    managed_connection,
    get_connection,
    load_driver,
    open_connection,
    register_driver_adapter,
)
from .descriptor import ConnectionDescriptor
from .exceptions import (
    ConfigError,
    ConnectionFailedError,
    ConnectionHelperError,
    DriverNotFoundError,
)
from .readers import (
    PROPERTIES_READERS,
    ConnectionPropertiesReader,
    HibernatePropertiesReader,
    StrykerPropertiesReader,
    find_properties_reader,
    read_connection_descriptor,
)

__all__ = [
    "managed_connection",
    "get_connection",
    "load_driver",
    "open_connection",
    "register_driver_adapter",
    "ConnectionDescriptor",
    "ConfigError",
    "ConnectionFailedError",
    "ConnectionHelperError",
    "DriverNotFoundError",
    "PROPERTIES_READERS",
    "ConnectionPropertiesReader",
    "HibernatePropertiesReader",
    "StrykerPropertiesReader",
    "find_properties_reader",
    "read_connection_descriptor",
]
