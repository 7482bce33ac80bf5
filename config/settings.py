import os
from dotenv import load_dotenv
from typing import List


# Load environment variables from a .env file if present. This only needs to
# happen once so we do it at import time before reading any variables.
load_dotenv()

CONNECTION_LOG_LEVEL = os.getenv("CONNECTION_LOG_LEVEL", "INFO")


def get_search_path() -> List[str]:
    """Return the directories searched for connection properties files.

    ``CONNECTION_SEARCH_PATH`` holds one or more directories separated by
    ``os.pathsep``. When it is unset or lists no directories the current
    working directory is used. The environment is read on every call so
    tests and callers can change it after import.
    """
    raw = os.getenv("CONNECTION_SEARCH_PATH")
    if not raw:
        return [os.getcwd()]
    paths = [part for part in raw.split(os.pathsep) if part.strip()]
    return paths or [os.getcwd()]


class ConnectionConstants:
    """Default values used when locating and opening connections."""

    #: Properties file read first
    STRYKER_PROPERTIES_FILE = "jstryker.properties"

    #: Hibernate style properties file used as fallback
    HIBERNATE_PROPERTIES_FILE = "hibernate.properties"

    #: Port used for ``mysql://`` URLs that do not name one
    DEFAULT_MYSQL_PORT = 3306
