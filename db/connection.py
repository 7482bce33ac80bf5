"""Open DB-API connections from settings found in properties files.

The driver entry of a properties file names the DB-API module to import
(``sqlite3``, ``pyodbc``, ``mysql.connector``, ``psycopg2`` ...). Each module
has its own ``connect`` signature, so a small adapter turns the descriptor
into the call that module expects.
"""

from __future__ import annotations

import importlib
import logging
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, Optional, Sequence
from urllib.parse import urlsplit

from config import ConnectionConstants
from db.descriptor import ConnectionDescriptor
from db.exceptions import ConnectionFailedError, DriverNotFoundError
from db.readers import PROPERTIES_READERS, ConnectionPropertiesReader, read_connection_descriptor
from utils.logging_helper import record_failure, record_success

logger = logging.getLogger(__name__)

DriverAdapter = Callable[[Any, ConnectionDescriptor], Any]


def _strip_prefix(url: str, *prefixes: str) -> str:
    for prefix in prefixes:
        if url.lower().startswith(prefix):
            return url[len(prefix):]
    return url


def _connect_sqlite(module: Any, descriptor: ConnectionDescriptor) -> Any:
    return module.connect(_strip_prefix(descriptor.url, "jdbc:sqlite:", "sqlite:"))


def _odbc_value(value: str) -> str:
    """Brace-quote an ODBC attribute value that could end the attribute early."""
    if any(ch in value for ch in ";{} ") or value != value.strip():
        return "{" + value.replace("}", "}}") + "}"
    return value


def _connect_odbc(module: Any, descriptor: ConnectionDescriptor) -> Any:
    conn_str = descriptor.url.rstrip(";")
    if descriptor.username:
        conn_str += f";UID={_odbc_value(descriptor.username)}"
    if descriptor.password:
        conn_str += f";PWD={_odbc_value(descriptor.password)}"
    return module.connect(conn_str)


def _connect_mysql(module: Any, descriptor: ConnectionDescriptor) -> Any:
    parts = urlsplit(_strip_prefix(descriptor.url, "jdbc:"))
    if parts.scheme != "mysql" or not parts.hostname:
        raise ValueError(f"Invalid MySQL URL, expected mysql://host[:port]/database: {descriptor.redacted_url()}")
    return module.connect(
        host=parts.hostname,
        port=parts.port or ConnectionConstants.DEFAULT_MYSQL_PORT,
        database=parts.path.lstrip("/") or None,
        user=descriptor.username,
        password=descriptor.password,
    )


def _connect_default(module: Any, descriptor: ConnectionDescriptor) -> Any:
    kwargs = {}
    if descriptor.username:
        kwargs["user"] = descriptor.username
    if descriptor.password:
        kwargs["password"] = descriptor.password
    return module.connect(descriptor.url, **kwargs)


_DRIVER_ADAPTERS: Dict[str, DriverAdapter] = {
    "sqlite3": _connect_sqlite,
    "pyodbc": _connect_odbc,
    "mysql.connector": _connect_mysql,
}


def register_driver_adapter(driver: str, adapter: DriverAdapter) -> None:
    """Use ``adapter`` to open connections for the ``driver`` module."""
    _DRIVER_ADAPTERS[driver] = adapter


def load_driver(driver: str) -> Any:
    """Import and return the DB-API module named ``driver``.

    Raises:
        DriverNotFoundError: If the module cannot be imported or has no
            ``connect`` function.
    """
    try:
        module = importlib.import_module(driver)
    except (ImportError, TypeError, ValueError) as e:
        raise DriverNotFoundError(driver, e) from e

    if not callable(getattr(module, "connect", None)):
        raise DriverNotFoundError(driver)
    return module


def open_connection(descriptor: ConnectionDescriptor) -> Any:
    """Return a live connection for ``descriptor``.

    Raises:
        DriverNotFoundError: If the driver module cannot be loaded.
        ConnectionFailedError: If the driver fails to connect.
    """
    module = load_driver(descriptor.driver)
    adapter = _DRIVER_ADAPTERS.get(descriptor.driver, _connect_default)
    try:
        return adapter(module, descriptor)
    except Exception as e:
        raise ConnectionFailedError(descriptor.redacted_url(), e) from e


def get_connection(
    readers: Sequence[ConnectionPropertiesReader] = PROPERTIES_READERS,
    search_path: Optional[Sequence[str]] = None,
    on_resolved: Optional[Callable[[ConnectionDescriptor], None]] = None,
) -> Any:
    """Open a connection using the first properties file found.

    ``jstryker.properties`` is tried first, then ``hibernate.properties``.
    ``on_resolved`` is called with the descriptor before connecting.
    Every failure is raised as a :class:`~db.exceptions.ConnectionHelperError`.
    """
    try:
        descriptor = read_connection_descriptor(readers, search_path)
        if on_resolved is not None:
            on_resolved(descriptor)
        logger.info(f"Opening {descriptor.driver} connection to {descriptor.redacted_url()}")
        conn = open_connection(descriptor)
    except Exception:
        record_failure()
        raise
    record_success()
    return conn


@contextmanager
def managed_connection(
    readers: Sequence[ConnectionPropertiesReader] = PROPERTIES_READERS,
    search_path: Optional[Sequence[str]] = None,
) -> Iterator[Any]:
    """Context manager that closes the connection from :func:`get_connection`."""
    conn = get_connection(readers, search_path)
    try:
        yield conn
    finally:
        conn.close()
