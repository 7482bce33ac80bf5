"""Configuration settings for locating database connection properties."""

from .settings import (
    CONNECTION_LOG_LEVEL,
    ConnectionConstants,
    get_search_path,
)

__all__ = [
    "CONNECTION_LOG_LEVEL",
    "ConnectionConstants",
    "get_search_path",
]
