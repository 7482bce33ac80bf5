"""Check that the configured database connection can be opened.

Looks for ``jstryker.properties`` and then ``hibernate.properties`` in the
search path (``CONNECTION_SEARCH_PATH`` or the current directory), opens a
connection with the first file found and closes it again.
"""

import argparse
import logging
import sys
from typing import List, Optional

from config import settings
from db import ConnectionDescriptor, ConnectionHelperError, get_connection
from utils.logging_helper import operation_counts, setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments for the connection check."""
    parser = argparse.ArgumentParser(description="Open and close the configured database connection")
    parser.add_argument(
        "--search-path",
        action="append",
        metavar="DIR",
        help="Directory to search for properties files. May be given more than once. "
             "Overrides the CONNECTION_SEARCH_PATH environment variable."
    )
    parser.add_argument(
        "--show-settings",
        action="store_true",
        help="Print the connection settings that were found, with the password masked."
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging."
    )
    return parser.parse_args(argv)


def print_settings(descriptor: ConnectionDescriptor) -> None:
    for key, value in descriptor.as_dict(mask_password=True).items():
        print(f"{key}: {value}")


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point. Returns the process exit code."""
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else settings.CONNECTION_LOG_LEVEL)

    try:
        conn = get_connection(
            search_path=args.search_path,
            on_resolved=print_settings if args.show_settings else None,
        )
    except ConnectionHelperError as e:
        logger.error(f"Connection check failed: {e}")
        return 1

    conn.close()
    logger.info(
        "Connection check completed - successes: %s failures: %s",
        operation_counts["success"],
        operation_counts["failure"],
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
