"""Readers that pull connection settings out of properties files.

Two formats are supported and consulted in a fixed order:

``jstryker.properties``
    ``driver``, ``jdbc.url``, ``user`` and ``password``.

``hibernate.properties``
    ``hibernate.connection.driver_class``, ``hibernate.connection.url``,
    ``hibernate.connection.username`` and ``hibernate.connection.password``.

Both are Java properties files: ``key=value``, ``key: value`` and ``key value``
are all accepted, ``#`` and ``!`` start comment lines, and a trailing backslash
continues a line. Lines are rewritten as ``key="value"`` and handed to
:func:`dotenv.dotenv_values`, so ``${VAR}`` references to environment variables
are expanded. A ``#`` inside a value is kept as part of the value.
"""

from __future__ import annotations

import io
import logging
import os
import re
from typing import Iterable, Iterator, List, Optional, Sequence

from dotenv import dotenv_values

from config import ConnectionConstants, get_search_path
from db.descriptor import ConnectionDescriptor
from db.exceptions import ConfigError

logger = logging.getLogger(__name__)

# key, optional separator (= or :) with surrounding blanks, value
_PROPERTY_RE = re.compile(r"^((?:\\.|[^\s=:\\])+)\s*[=:]?\s*(.*)$")
_QUOTED_RE = re.compile(r"^('[^']*'|\"(?:\\.|[^\"\\])*\")$")


def _logical_lines(text: str) -> Iterator[str]:
    """Yield lines with backslash continuations joined."""
    pending = ""
    for raw in text.splitlines():
        line = raw.lstrip() if pending else raw
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2:
            pending += line[:-1]
            continue
        yield pending + line
        pending = ""
    if pending:
        yield pending


def normalise_properties(text: str) -> str:
    """Rewrite Java properties text as ``key="value"`` lines for dotenv."""
    lines = []
    for line in _logical_lines(text):
        line = line.strip()
        if not line or line[0] in "#!":
            continue
        match = _PROPERTY_RE.match(line)
        if not match:
            continue
        key = re.sub(r"\\(.)", r"\1", match.group(1))
        value = match.group(2).strip()
        if not _QUOTED_RE.match(value):
            value = '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'
        lines.append(f"{key}={value}")
    return "\n".join(lines) + "\n"


class ConnectionPropertiesReader:
    """Base class for properties file formats."""

    FILE_NAME: str = ""
    DRIVER_KEY: str = ""
    URL_KEY: str = ""
    USERNAME_KEY: str = ""
    PASSWORD_KEY: str = ""

    def locate(self, search_path: Iterable[str]) -> Optional[str]:
        """Return the first ``FILE_NAME`` found in ``search_path``."""
        for directory in search_path:
            candidate = os.path.join(directory, self.FILE_NAME)
            if os.path.isfile(candidate):
                return candidate
        return None

    def exists(self, search_path: Iterable[str]) -> bool:
        return self.locate(search_path) is not None

    def read(self, search_path: Sequence[str]) -> ConnectionDescriptor:
        """Parse the properties file and return its connection descriptor.

        Raises:
            ConfigError: If the file is missing, cannot be read or lacks the
                driver or URL entry.
        """
        path = self.locate(search_path)
        if path is None:
            raise ConfigError(f"{self.FILE_NAME} not found in search path: {os.pathsep.join(search_path)}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                text = normalise_properties(f.read())
            values = dotenv_values(stream=io.StringIO(text))
        except (OSError, ValueError) as e:
            raise ConfigError(f"Could not read {path}: {e}", e) from e

        missing = [key for key in (self.DRIVER_KEY, self.URL_KEY) if not (values.get(key) or "").strip()]
        if missing:
            raise ConfigError(f"Missing required properties in {path}: " + ", ".join(missing))

        logger.debug(f"Read connection properties from {path}")
        return ConnectionDescriptor(
            driver=values[self.DRIVER_KEY].strip(),
            url=values[self.URL_KEY].strip(),
            username=(values.get(self.USERNAME_KEY) or "").strip(),
            password=(values.get(self.PASSWORD_KEY) or "").strip(),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.FILE_NAME!r})"


class StrykerPropertiesReader(ConnectionPropertiesReader):
    """Reads ``jstryker.properties``."""

    FILE_NAME = ConnectionConstants.STRYKER_PROPERTIES_FILE
    DRIVER_KEY = "driver"
    URL_KEY = "jdbc.url"
    USERNAME_KEY = "user"
    PASSWORD_KEY = "password"


class HibernatePropertiesReader(ConnectionPropertiesReader):
    """Reads ``hibernate.properties``."""

    FILE_NAME = ConnectionConstants.HIBERNATE_PROPERTIES_FILE
    DRIVER_KEY = "hibernate.connection.driver_class"
    URL_KEY = "hibernate.connection.url"
    USERNAME_KEY = "hibernate.connection.username"
    PASSWORD_KEY = "hibernate.connection.password"


# Consulted in this order; the first file found wins.
PROPERTIES_READERS = (
    StrykerPropertiesReader(),
    HibernatePropertiesReader(),
)


def find_properties_reader(
    readers: Sequence[ConnectionPropertiesReader],
    search_path: Sequence[str],
) -> ConnectionPropertiesReader:
    """Return the first reader whose properties file exists."""
    for reader in readers:
        if reader.exists(search_path):
            return reader
        logger.debug(f"{reader.FILE_NAME} not found, trying next format")

    names = " or ".join(reader.FILE_NAME for reader in readers)
    raise ConfigError(f"{names} not found in search path: {os.pathsep.join(search_path)}")


def read_connection_descriptor(
    readers: Sequence[ConnectionPropertiesReader] = PROPERTIES_READERS,
    search_path: Optional[Sequence[str]] = None,
) -> ConnectionDescriptor:
    """Return the descriptor from the first available properties file.

    A file that exists but cannot be used fails the lookup instead of
    falling back to the next format.
    """
    paths: List[str] = list(search_path) if search_path is not None else get_search_path()
    reader = find_properties_reader(readers, paths)
    return reader.read(paths)
