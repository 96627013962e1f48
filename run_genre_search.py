#!/usr/bin/env python3
"""
Searches Hardcover list names and slugs for common genre terms.

Usage:
    python run_genre_search.py [term]
"""
import sys

from hardcover.config import Settings
from hardcover.discovery import GENRE_SEARCH_TERMS, search_genre_lists
from hardcover.graphql_client import GraphQLClient
from hardcover.logging_setup import configure_logging


def main(term=None) -> int:
    settings = Settings()
    configure_logging(settings.log_level)
    client = GraphQLClient.from_settings(settings)

    terms = [term] if term else GENRE_SEARCH_TERMS

    print("\n🔍 SEARCHING FOR GENRE LISTS\n")
    print("=" * 80)

    for search_term, records in search_genre_lists(client, terms).items():
        print(f'\n📚 Searching: "{search_term}"')
        if not records:
            print("  ❌ No lists found")
            continue
        for r in records:
            print(f'  ✅ "{r.slug}" - {r.name} ({r.book_count} books)')

    print("\n" + "=" * 80 + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else None))
