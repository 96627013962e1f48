#!/usr/bin/env python3
"""
Dumps the schema fields of a Hardcover GraphQL type (default: list).

Usage:
    python run_introspection.py [type_name]
"""
import sys
import json

from hardcover.config import Settings
from hardcover.discovery import introspect_type
from hardcover.graphql_client import GraphQLClient
from hardcover.logging_setup import configure_logging


def main(type_name="list") -> int:
    settings = Settings()
    configure_logging(settings.log_level)

    schema = introspect_type(GraphQLClient.from_settings(settings), type_name)
    if schema is None:
        print(f"❌ No schema information for type '{type_name}'")
        return 0

    print(json.dumps(schema, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else "list"))
