#!/usr/bin/env python3
"""
Filters the most popular Hardcover lists down to genre-related ones.
"""
import sys
import logging

from hardcover.config import Settings
from hardcover.discovery import popular_genre_lists
from hardcover.errors import FetchError
from hardcover.graphql_client import GraphQLClient
from hardcover.logging_setup import configure_logging

logger = logging.getLogger("run_popular_lists")


def main() -> int:
    settings = Settings()
    configure_logging(settings.log_level)

    try:
        matches = popular_genre_lists(GraphQLClient.from_settings(settings))
    except FetchError as e:
        logger.error(f"Could not fetch lists: {e}")
        return 0

    print(f"\n📚 Genre-related lists ({len(matches)}):\n")
    for r in matches:
        print(f'✅ slug: "{r.slug}"')
        print(f"   name: {r.name}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
