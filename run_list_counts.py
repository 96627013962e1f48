#!/usr/bin/env python3
"""
Prints every Hardcover list that has books, largest first.
"""
import sys
import logging

from hardcover.config import Settings
from hardcover.discovery import list_counts
from hardcover.errors import FetchError
from hardcover.graphql_client import GraphQLClient
from hardcover.logging_setup import configure_logging
from hardcover.reporter import render_list_counts

logger = logging.getLogger("run_list_counts")


def main() -> int:
    settings = Settings()
    configure_logging(settings.log_level)

    try:
        records = list_counts(GraphQLClient.from_settings(settings))
    except FetchError as e:
        logger.error(f"Could not fetch lists: {e}")
        return 0

    print()
    print(render_list_counts(records))
    print("\n" + "=" * 80)
    return 0


if __name__ == "__main__":
    sys.exit(main())
